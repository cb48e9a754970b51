import imaplib
import ssl
import sys
from contextlib import contextmanager
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from cinemacal import CinemaCal, IcsCalendar
from cinemacal.credentials import load_credentials
from cinemacal.gmail import GmailMailbox
from cinemacal.google_calendar import GoogleCalendar
from cinemacal.imap import ImapMailbox
from settings import (
    calendar_backend,
    calendar_id,
    debug,
    google_credentials_file,
    google_token_file,
    ics_path,
    imap_folder,
    imap_host,
    imap_password,
    imap_port,
    imap_user,
    mail_backend,
    search_key,
    sender_addresses,
    tzinfo,
)

MAIL_BACKENDS = ("gmail", "imap")
CALENDAR_BACKENDS = ("google", "ics")


def check_settings() -> None:
    if mail_backend not in MAIL_BACKENDS:
        raise ValueError(f"Unknown mail backend: {mail_backend}")
    if calendar_backend not in CALENDAR_BACKENDS:
        raise ValueError(f"Unknown calendar backend: {calendar_backend}")
    if len(sender_addresses) <= 0:
        raise ValueError("No sender addresses configured")
    if mail_backend == "imap" and (imap_user == "" or imap_password == ""):
        raise ValueError("IMAP user and password are required for the imap backend")
    if mail_backend == "imap" and not imap_port.isdigit():
        raise ValueError(f"IMAP port must be a number: {imap_port!r}")


def needs_google_credentials() -> bool:
    return mail_backend == "gmail" or calendar_backend == "google"


def create_calendar(credentials=None):
    if calendar_backend == "ics":
        return IcsCalendar.load(ics_path, tzinfo=tzinfo)

    return GoogleCalendar.from_credentials(credentials, calendar_id, tzinfo)


@contextmanager
def open_mailbox(credentials=None):
    if mail_backend == "gmail":
        yield GmailMailbox.from_credentials(credentials)
        return

    context = ssl.create_default_context()
    with imaplib.IMAP4_SSL(imap_host, int(imap_port), ssl_context=context) as imap:
        imap.login(imap_user, imap_password)
        yield ImapMailbox(imap, imap_folder)


def main() -> int:
    try:
        check_settings()
    except ValueError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        credentials = None
        if needs_google_credentials():
            credentials = load_credentials(google_credentials_file, google_token_file)
        calendar = create_calendar(credentials)
    except (GoogleAuthError, OSError, ValueError) as e:
        print(f"Failed to set up the calendar: {e}", file=sys.stderr)
        return 2

    try:
        with open_mailbox(credentials) as mailbox:
            instance = CinemaCal(
                mailbox,
                calendar,
                sender_addresses,
                search_key,
                tzinfo=tzinfo,
                dry_run=debug,
            )
            instance.run()
    except (HttpError, GoogleAuthError, imaplib.IMAP4.error, OSError) as e:
        print(f"Failed to register tickets: {e}", file=sys.stderr)
        return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
