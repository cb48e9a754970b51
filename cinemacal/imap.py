import imaplib
from email import policy
from email.parser import BytesParser
from .mailbox import MailMessage, MailQuery, MailThread


def parse_uid_search_data(data) -> list[str]:
    if not data or not data[0]:
        return []
    raw = data[0]
    if isinstance(raw, bytes):
        return [uid.decode("ascii", errors="ignore") for uid in raw.split()]
    return [uid for uid in str(raw).split() if uid]


def parse_fetch_message(fetch_data) -> bytes:
    for item in fetch_data:
        if isinstance(item, tuple) and len(item) >= 2 and isinstance(item[1], bytes):
            return item[1]
    return b""


def extract_plain_text(raw_message: bytes) -> str:
    message = BytesParser(policy=policy.default).parsebytes(raw_message)
    part = message.get_body(preferencelist=("plain",))
    if part is None:
        return ""
    return part.get_content()


class ImapMailbox:
    """Reads mail over an already logged-in IMAP connection."""

    imap: imaplib.IMAP4
    folder: str

    def __init__(self, imap: imaplib.IMAP4, folder: str = "INBOX") -> None:
        self.imap = imap
        self.folder = folder

    def search(self, query: MailQuery) -> list[MailThread]:
        status, data = self.imap.select(self.folder, readonly=True)
        if status != "OK":
            raise imaplib.IMAP4.error(f"Could not select mailbox {self.folder!r}: {data}")

        status, data = self.imap.uid("SEARCH", None, query.to_imap_criteria())
        if status != "OK":
            raise imaplib.IMAP4.error(f"Search failed: {data}")

        # IMAP has no conversations; every message stands alone
        threads: list[MailThread] = []
        for uid in parse_uid_search_data(data):
            body = self.fetch_body(uid)
            threads.append(MailThread(messages=[MailMessage(body=body)]))

        return threads

    def fetch_body(self, uid: str) -> str:
        status, fetch_data = self.imap.uid("FETCH", uid, "(BODY.PEEK[])")
        if status != "OK" or fetch_data is None:
            raise imaplib.IMAP4.error(f"Could not fetch message {uid}")

        return extract_plain_text(parse_fetch_message(fetch_data))
