import arrow
from googleapiclient.discovery import build
from .event import Event
from .ticket import DEFAULT_TZINFO


class GoogleCalendar:
    service: object
    calendar_id: str
    tzinfo: str

    def __init__(
        self, service, calendar_id: str = "primary", tzinfo: str = DEFAULT_TZINFO
    ) -> None:
        self.service = service
        self.calendar_id = calendar_id
        self.tzinfo = tzinfo

    @classmethod
    def from_credentials(
        cls, credentials, calendar_id: str = "primary", tzinfo: str = DEFAULT_TZINFO
    ) -> "GoogleCalendar":
        service = build("calendar", "v3", credentials=credentials)
        return cls(service, calendar_id, tzinfo)

    def get_events(
        self, begin: arrow.Arrow, end: arrow.Arrow, search: str
    ) -> list[Event]:
        # An end before the start (screening past midnight) is an empty range
        if end <= begin:
            return []

        events: list[Event] = []
        page_token: str | None = None
        while True:
            result = (
                self.service.events()
                .list(
                    calendarId=self.calendar_id,
                    timeMin=begin.isoformat(),
                    timeMax=end.isoformat(),
                    q=search,
                    singleEvents=True,
                    orderBy="startTime",
                    pageToken=page_token,
                )
                .execute()
            )

            for item in result.get("items", []):
                events.append(self.parse_item(item))

            page_token = result.get("nextPageToken")
            if page_token is None:
                break

        return events

    def create_event(
        self,
        summary: str,
        begin: arrow.Arrow,
        end: arrow.Arrow,
        description: str | None = None,
        location: str | None = None,
    ) -> Event:
        body = {
            "summary": summary,
            "start": {"dateTime": begin.isoformat(), "timeZone": self.tzinfo},
            "end": {"dateTime": end.isoformat(), "timeZone": self.tzinfo},
        }
        if type(description) is str:
            body["description"] = description
        if type(location) is str:
            body["location"] = location

        result = (
            self.service.events()
            .insert(calendarId=self.calendar_id, body=body)
            .execute()
        )

        return self.parse_item(result)

    def parse_item(self, item: dict) -> Event:
        begin = self.parse_time(item["start"])
        end = self.parse_time(item["end"])

        timestamp = begin
        if "updated" in item:
            timestamp = arrow.get(item["updated"])

        return Event(
            uid=item.get("iCalUID", item.get("id", "")),
            timestamp=timestamp,
            begin=begin,
            end=end,
            summary=item.get("summary", ""),
            description=item.get("description"),
            location=item.get("location"),
        )

    def parse_time(self, value: dict) -> arrow.Arrow:
        if "dateTime" in value:
            return arrow.get(value["dateTime"]).to(self.tzinfo)

        # all-day events only carry a date
        return arrow.get(value["date"], "YYYY-MM-DD", tzinfo=self.tzinfo)
