from __future__ import annotations

import arrow

from cinemacal import Event, MailMessage, MailQuery, MailThread, Ticket

TZINFO = "Asia/Tokyo"


def make_body(
    *,
    ticket_number: str = "1234567890",
    title: str = "Movie A",
    date: str = "2024年5月3日(金) 18:30 - 20:45",
    theater: str = "シネマ・ワン　a studio",
    sheet: str = "F-12",
    newline: str = "\r\n",
) -> str:
    lines = [
        "シネマシティをご利用いただきありがとうございます。",
        "",
        f"■チケット番号：{ticket_number}",
        "■登録電話番号：5678（下4ケタのみでOK）",
        "",
        title,
        "■上映時間",
        date,
        "■劇場 （ワン：高島屋右隣／ツー：モノレール下遊歩道沿）",
        theater,
        "■座席",
        sheet,
        "",
        "※上映開始後の入場はご遠慮ください。",
        "",
    ]
    return newline.join(lines)


def make_ticket(
    *,
    ticket_number: str = "1234567890",
    title: str = "Movie A",
    start: tuple[int, int] = (18, 30),
    end: tuple[int, int] = (20, 45),
    theater: str = "シネマ・ワン　a studio",
    sheet: str = "F-12",
) -> Ticket:
    return Ticket(
        ticket_number=ticket_number,
        title=title,
        start_time=arrow.get(2024, 5, 3, start[0], start[1], tzinfo=TZINFO),
        end_time=arrow.get(2024, 5, 3, end[0], end[1], tzinfo=TZINFO),
        theater=theater,
        sheet=sheet,
    )


def make_event(
    *,
    summary: str = "Movie A",
    begin: arrow.Arrow | None = None,
    end: arrow.Arrow | None = None,
    description: str | None = None,
    location: str | None = None,
) -> Event:
    if begin is None:
        begin = arrow.get(2024, 5, 3, 18, 30, tzinfo=TZINFO)
    if end is None:
        end = begin.shift(hours=2)
    return Event(
        uid=f"{summary}@example.test",
        timestamp=begin,
        begin=begin,
        end=end,
        summary=summary,
        description=description,
        location=location,
    )


class FakeMailbox:
    def __init__(self, bodies: list[list[str]] | None = None) -> None:
        self.threads = [
            MailThread(messages=[MailMessage(body=body) for body in thread])
            for thread in (bodies or [])
        ]
        self.queries: list[MailQuery] = []

    def search(self, query: MailQuery) -> list[MailThread]:
        self.queries.append(query)
        return self.threads


class FakeCalendar:
    def __init__(self, events: list[Event] | None = None) -> None:
        self.events = list(events or [])
        self.searches: list[tuple[arrow.Arrow, arrow.Arrow, str]] = []
        self.created: list[Event] = []

    def get_events(self, begin: arrow.Arrow, end: arrow.Arrow, search: str) -> list[Event]:
        self.searches.append((begin, end, search))
        return list(self.events)

    def create_event(
        self,
        summary: str,
        begin: arrow.Arrow,
        end: arrow.Arrow,
        description: str | None = None,
        location: str | None = None,
    ) -> Event:
        event = Event(
            uid=f"created-{len(self.created)}",
            timestamp=begin,
            begin=begin,
            end=end,
            summary=summary,
            description=description,
            location=location,
        )
        self.created.append(event)
        return event


class FakeRequest:
    def __init__(self, response: dict) -> None:
        self.response = response

    def execute(self) -> dict:
        return self.response


class FakeEvents:
    def __init__(self, pages: list[dict] | None = None) -> None:
        self.pages = pages or []
        self.list_calls: list[dict] = []
        self.insert_calls: list[dict] = []

    def list(self, **kwargs) -> FakeRequest:
        self.list_calls.append(kwargs)
        return FakeRequest(self.pages[len(self.list_calls) - 1])

    def insert(self, calendarId: str, body: dict) -> FakeRequest:
        self.insert_calls.append({"calendarId": calendarId, "body": body})
        item = dict(body)
        item["id"] = "created1"
        item["iCalUID"] = "created1@google.com"
        item["updated"] = "2024-05-02T00:00:00.000Z"
        return FakeRequest(item)


class FakeCalendarService:
    def __init__(self, events: FakeEvents) -> None:
        self._events = events

    def events(self) -> FakeEvents:
        return self._events
