from .calendar import IcsCalendar
from .cinemacal import CinemaCal, RunResult
from .event import Event, EventCalendar
from .mailbox import Mailbox, MailMessage, MailQuery, MailThread
from .reconcile import NoTicketsError, find_missing_tickets, ticket_window
from .ticket import NoMatch, Ticket, parse_body
