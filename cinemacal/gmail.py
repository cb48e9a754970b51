import base64
from googleapiclient.discovery import build
from .mailbox import MailMessage, MailQuery, MailThread


def decode_body_data(data: str) -> str:
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded).decode("utf-8", errors="replace")


def extract_plain_body(payload: dict) -> str:
    """
    Collect the text/plain parts of a Gmail message payload.

    Args:
        payload: "payload" of a message fetched with format="full"

    Returns:
        str: Decoded plain text, empty when the message has no plain part
    """
    if "parts" in payload:
        return "".join(extract_plain_body(part) for part in payload["parts"])

    if payload.get("mimeType") != "text/plain":
        return ""

    data = payload.get("body", {}).get("data")
    if not data:
        return ""

    return decode_body_data(data)


class GmailMailbox:
    service: object
    user_id: str

    def __init__(self, service, user_id: str = "me") -> None:
        self.service = service
        self.user_id = user_id

    @classmethod
    def from_credentials(cls, credentials, user_id: str = "me") -> "GmailMailbox":
        service = build("gmail", "v1", credentials=credentials)
        return cls(service, user_id)

    def search(self, query: MailQuery) -> list[MailThread]:
        threads: list[MailThread] = []
        for thread_id in self.search_thread_ids(query.to_gmail_query()):
            thread = (
                self.service.users()
                .threads()
                .get(userId=self.user_id, id=thread_id, format="full")
                .execute()
            )
            messages = [
                MailMessage(body=extract_plain_body(message.get("payload", {})))
                for message in thread.get("messages", [])
            ]
            threads.append(MailThread(messages=messages))

        return threads

    def search_thread_ids(self, q: str) -> list[str]:
        thread_ids: list[str] = []
        page_token: str | None = None
        while True:
            result = (
                self.service.users()
                .threads()
                .list(userId=self.user_id, q=q, pageToken=page_token)
                .execute()
            )
            thread_ids += [thread["id"] for thread in result.get("threads", [])]

            page_token = result.get("nextPageToken")
            if page_token is None:
                break

        return thread_ids
