import arrow
from typing import Sequence
from .event import Event
from .ticket import Ticket


class NoTicketsError(ValueError):
    pass


def ticket_window(tickets: Sequence[Ticket]) -> tuple[arrow.Arrow, arrow.Arrow]:
    """Return the earliest start and the latest end over all tickets."""
    if len(tickets) <= 0:
        raise NoTicketsError("Cannot derive a time window without any tickets")

    begin = min(ticket.start_time for ticket in tickets)
    end = max(ticket.end_time for ticket in tickets)
    return begin, end


def is_registered(ticket: Ticket, events: Sequence[Event]) -> bool:
    # Calendar titles may carry extra decoration around the movie title
    return any(ticket.title in event.summary for event in events)


def find_missing_tickets(
    tickets: Sequence[Ticket], events: Sequence[Event]
) -> list[Ticket]:
    return [ticket for ticket in tickets if not is_registered(ticket, events)]
