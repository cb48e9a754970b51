import arrow
from dataclasses import dataclass, field
from .event import Event, EventCalendar
from .mailbox import Mailbox, MailQuery
from .reconcile import find_missing_tickets, ticket_window
from .ticket import DEFAULT_TZINFO, NoMatch, Ticket, extract_tickets


@dataclass(frozen=True)
class RunResult:
    tickets: list[Ticket] = field(default_factory=list)
    skipped: list[NoMatch] = field(default_factory=list)
    existing: list[Event] = field(default_factory=list)
    missing: list[Ticket] = field(default_factory=list)
    registered: list[Event] = field(default_factory=list)


class CinemaCal:
    mailbox: Mailbox
    calendar: EventCalendar
    sender_addresses: list[str]
    search_key: str
    tzinfo: str
    dry_run: bool

    def __init__(
        self,
        mailbox: Mailbox,
        calendar: EventCalendar,
        sender_addresses: list[str],
        search_key: str,
        tzinfo: str = DEFAULT_TZINFO,
        dry_run: bool = False,
    ) -> None:
        self.mailbox = mailbox
        self.calendar = calendar
        self.sender_addresses = sender_addresses
        self.search_key = search_key
        self.tzinfo = tzinfo
        self.dry_run = dry_run

    def run(self, now: arrow.Arrow | None = None) -> RunResult:
        # Read mail from midnight of the day before
        threshold = self.newer_threshold(now)

        tickets, skipped = self.fetch_tickets(threshold)
        print(f"Found {len(tickets)} tickets ({len(skipped)} messages skipped)")
        if len(tickets) <= 0:
            print("No tickets found")
            return RunResult(skipped=skipped)

        begin, end = ticket_window(tickets)
        existing_events = self.fetch_existing_events(begin, end)
        print(f"Found {len(existing_events)} existing events")

        missing_tickets = find_missing_tickets(tickets, existing_events)

        registered: list[Event] = []
        for ticket in missing_tickets:
            if self.dry_run:
                print(f"Would register: {ticket.title}")
                continue

            event = self.register_event(ticket)
            registered.append(event)
            print(f"Registered: {event.summary}")

        return RunResult(
            tickets=tickets,
            skipped=skipped,
            existing=existing_events,
            missing=missing_tickets,
            registered=registered,
        )

    def newer_threshold(self, now: arrow.Arrow | None = None) -> arrow.Arrow:
        if now is None:
            now = arrow.now(self.tzinfo)

        return now.to(self.tzinfo).floor("day").shift(days=-1)

    def fetch_tickets(
        self, threshold: arrow.Arrow
    ) -> tuple[list[Ticket], list[NoMatch]]:
        query = MailQuery(sender_addresses=self.sender_addresses, newer_than=threshold)
        threads = self.mailbox.search(query)

        bodies = [message.body for thread in threads for message in thread.messages]
        return extract_tickets(bodies, self.tzinfo)

    def fetch_existing_events(
        self, begin: arrow.Arrow, end: arrow.Arrow
    ) -> list[Event]:
        return self.calendar.get_events(begin, end, self.search_key)

    def generate_description(self, ticket: Ticket) -> str:
        return (
            f"劇場: {ticket.theater}\n"
            f"座席: {ticket.sheet}\n"
            f"チケット番号: {ticket.ticket_number}\n"
            f"検索用キーワード: {self.search_key}"
        )

    def register_event(self, ticket: Ticket) -> Event:
        return self.calendar.create_event(
            ticket.title,
            ticket.start_time,
            ticket.end_time,
            description=self.generate_description(ticket),
            location=ticket.theater,
        )
