import arrow
import icalendar
import os
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from .event import Event
from .ticket import DEFAULT_TZINFO


@dataclass
class IcsCalendar:
    """
    A calendar kept in a local iCalendar file.

    The parsed file is kept as is and new events are added to it, so
    properties the Event view does not carry (recurrence, alarms, time
    zones) are written back untouched.
    """

    path: str
    name: str = "シネマシティ"
    tzinfo: str = DEFAULT_TZINFO
    prod_id: str = "-//cinemacal//NONSGML CinemaCal//JA"
    method: str = "PUBLISH"
    version: str = "2.0"
    data: icalendar.Calendar | None = None
    events: list[Event] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.data is None:
            self.data = self.new_calendar()

    @classmethod
    def load(
        cls, path: str, name: str = "シネマシティ", tzinfo: str = DEFAULT_TZINFO
    ) -> "IcsCalendar":
        if not os.path.exists(path):
            return cls(path=path, name=name, tzinfo=tzinfo)

        with open(path, mode="rb") as file:
            data = icalendar.Calendar.from_ical(file.read())

        calendar = cls(path=path, name=name, tzinfo=tzinfo, data=data)
        for component in data.walk("VEVENT"):
            calendar.events.append(calendar.parse_component(component))

        return calendar

    def new_calendar(self) -> icalendar.Calendar:
        data = icalendar.Calendar()
        data.add("prodid", self.prod_id)
        data.add("method", self.method)
        data.add("version", self.version)
        data.add("x-wr-calname", self.name)
        data.add("x-wr-timezone", self.tzinfo)
        return data

    def parse_component(self, component) -> Event:
        begin = self.parse_time(component.decoded("DTSTART"))

        end = begin
        if "DTEND" in component:
            end = self.parse_time(component.decoded("DTEND"))

        timestamp = begin
        if "DTSTAMP" in component:
            timestamp = self.parse_time(component.decoded("DTSTAMP"))

        description: str | None = None
        if "DESCRIPTION" in component:
            description = str(component.get("DESCRIPTION"))

        location: str | None = None
        if "LOCATION" in component:
            location = str(component.get("LOCATION"))

        return Event(
            uid=str(component.get("UID", "")),
            timestamp=timestamp,
            begin=begin,
            end=end,
            summary=str(component.get("SUMMARY", "")),
            description=description,
            location=location,
        )

    def parse_time(self, value) -> arrow.Arrow:
        if isinstance(value, datetime) and value.tzinfo is not None:
            return arrow.get(value).to(self.tzinfo)

        # floating times and all-day dates are local
        return arrow.get(value, tzinfo=self.tzinfo)

    def get_events(
        self, begin: arrow.Arrow, end: arrow.Arrow, search: str
    ) -> list[Event]:
        return [
            event
            for event in self.events
            if event.overlaps(begin, end) and event.matches(search)
        ]

    def create_event(
        self,
        summary: str,
        begin: arrow.Arrow,
        end: arrow.Arrow,
        description: str | None = None,
        location: str | None = None,
    ) -> Event:
        event = Event(
            uid=f"{uuid.uuid4()}@cinemacal",
            timestamp=arrow.utcnow(),
            begin=begin,
            end=end,
            summary=summary,
            description=description,
            location=location,
        )

        component = icalendar.Event()
        component.add("uid", event.uid)
        component.add("dtstamp", self.to_utc(event.timestamp))
        component.add("dtstart", self.to_utc(event.begin))
        component.add("dtend", self.to_utc(event.end))
        component.add("summary", event.summary)
        component.add("transp", "OPAQUE")
        if type(location) is str:
            component.add("location", location)
        if type(description) is str:
            component.add("description", description)

        self.data.add_component(component)
        self.events.append(event)
        self.save()

        return event

    def to_utc(self, value: arrow.Arrow) -> datetime:
        return value.to("utc").datetime.replace(tzinfo=timezone.utc)

    def save(self) -> None:
        with open(self.path, mode="wb") as file:
            file.write(self.data.to_ical())
