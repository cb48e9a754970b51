from __future__ import annotations

import arrow

from cinemacal.google_calendar import GoogleCalendar
from tests.helpers import FakeCalendarService, FakeEvents

TZINFO = "Asia/Tokyo"


def test_get_events_pages_through_results() -> None:
    events = FakeEvents(
        pages=[
            {
                "items": [
                    {
                        "id": "e1",
                        "summary": "Movie A",
                        "start": {"dateTime": "2024-05-03T18:30:00+09:00"},
                        "end": {"dateTime": "2024-05-03T20:45:00+09:00"},
                    }
                ],
                "nextPageToken": "page2",
            },
            {
                "items": [
                    {
                        "id": "e2",
                        "summary": "Festival",
                        "description": "シネマシティ",
                        "start": {"date": "2024-05-03"},
                        "end": {"date": "2024-05-04"},
                    }
                ]
            },
        ]
    )
    calendar = GoogleCalendar(FakeCalendarService(events), "cinema@group.calendar.google.com", TZINFO)
    begin = arrow.get(2024, 5, 3, 10, 0, tzinfo=TZINFO)
    end = arrow.get(2024, 5, 3, 22, 0, tzinfo=TZINFO)

    found = calendar.get_events(begin, end, "シネマシティ")

    assert [event.summary for event in found] == ["Movie A", "Festival"]
    assert found[0].begin == arrow.get(2024, 5, 3, 18, 30, tzinfo=TZINFO)
    assert found[1].begin == arrow.get(2024, 5, 3, tzinfo=TZINFO)
    assert found[1].description == "シネマシティ"

    first_call = events.list_calls[0]
    assert first_call["calendarId"] == "cinema@group.calendar.google.com"
    assert first_call["timeMin"] == "2024-05-03T10:00:00+09:00"
    assert first_call["timeMax"] == "2024-05-03T22:00:00+09:00"
    assert first_call["q"] == "シネマシティ"
    assert first_call["singleEvents"] is True
    assert first_call["pageToken"] is None
    assert events.list_calls[1]["pageToken"] == "page2"


def test_create_event_sends_times_with_timezone() -> None:
    events = FakeEvents()
    calendar = GoogleCalendar(FakeCalendarService(events), tzinfo=TZINFO)
    begin = arrow.get(2024, 5, 3, 18, 30, tzinfo=TZINFO)
    end = arrow.get(2024, 5, 3, 20, 45, tzinfo=TZINFO)

    created = calendar.create_event(
        "Movie B", begin, end, description="劇場: c studio", location="c studio"
    )

    assert events.insert_calls == [
        {
            "calendarId": "primary",
            "body": {
                "summary": "Movie B",
                "start": {"dateTime": "2024-05-03T18:30:00+09:00", "timeZone": TZINFO},
                "end": {"dateTime": "2024-05-03T20:45:00+09:00", "timeZone": TZINFO},
                "description": "劇場: c studio",
                "location": "c studio",
            },
        }
    ]
    assert created.uid == "created1@google.com"
    assert created.summary == "Movie B"
    assert created.begin == begin
    assert created.end == end
    assert created.location == "c studio"


def test_create_event_omits_missing_description_and_location() -> None:
    events = FakeEvents()
    calendar = GoogleCalendar(FakeCalendarService(events), tzinfo=TZINFO)
    begin = arrow.get(2024, 5, 3, 18, 30, tzinfo=TZINFO)

    calendar.create_event("Movie C", begin, begin.shift(hours=2))

    body = events.insert_calls[0]["body"]
    assert "description" not in body
    assert "location" not in body


def test_get_events_skips_request_for_reversed_range() -> None:
    events = FakeEvents()
    calendar = GoogleCalendar(FakeCalendarService(events), tzinfo=TZINFO)
    begin = arrow.get(2024, 5, 3, 23, 30, tzinfo=TZINFO)
    end = arrow.get(2024, 5, 3, 1, 15, tzinfo=TZINFO)

    assert calendar.get_events(begin, end, "シネマシティ") == []
    assert events.list_calls == []
