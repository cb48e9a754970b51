import arrow
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class MailMessage:
    body: str


@dataclass(frozen=True)
class MailThread:
    messages: list[MailMessage] = field(default_factory=list)


@dataclass(frozen=True)
class MailQuery:
    """Mail sent by any of the sender addresses on or after a calendar date."""

    sender_addresses: list[str]
    newer_than: arrow.Arrow

    def __post_init__(self) -> None:
        if len(self.sender_addresses) <= 0:
            raise ValueError("At least one sender address is required")

    def to_gmail_query(self) -> str:
        address_query = " OR ".join(
            f"from:{address}" for address in self.sender_addresses
        )
        period_query = f"newer:{self.newer_than.format('YYYY-MM-DD')}"
        return f"({address_query}) AND {period_query}"

    def to_imap_criteria(self) -> str:
        # IMAP OR takes exactly two keys, so nest it in prefix form
        criteria = f'FROM "{self.sender_addresses[0]}"'
        for address in self.sender_addresses[1:]:
            criteria = f'OR {criteria} FROM "{address}"'

        since = self.newer_than.format("DD-MMM-YYYY", locale="en")
        return f"({criteria}) SINCE {since}"


class Mailbox(Protocol):
    def search(self, query: MailQuery) -> list[MailThread]:
        ...
