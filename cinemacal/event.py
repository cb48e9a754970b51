import arrow
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Event:
    uid: str
    timestamp: arrow.Arrow
    begin: arrow.Arrow
    end: arrow.Arrow
    summary: str
    description: str | None = None
    location: str | None = None

    def matches(self, keyword: str) -> bool:
        if len(keyword) == 0:
            return True

        keyword = keyword.lower()
        return any(
            keyword in text.lower()
            for text in (self.summary, self.description, self.location)
            if type(text) is str
        )

    def overlaps(self, begin: arrow.Arrow, end: arrow.Arrow) -> bool:
        return self.begin < end and self.end > begin


class EventCalendar(Protocol):
    def get_events(
        self, begin: arrow.Arrow, end: arrow.Arrow, search: str
    ) -> list[Event]:
        ...

    def create_event(
        self,
        summary: str,
        begin: arrow.Arrow,
        end: arrow.Arrow,
        description: str | None = None,
        location: str | None = None,
    ) -> Event:
        ...
