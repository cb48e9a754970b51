import os

# Keyword written into every registered event and used to read them back
search_key = os.environ.get("CINEMACAL_SEARCH_KEY", "シネマシティ")

sender_addresses = [
    address.strip()
    for address in os.environ.get(
        "CINEMACAL_SENDER_ADDRESSES", "ticket@cinemacity.co.jp"
    ).split(",")
    if address.strip()
]

tzinfo = os.environ.get("CINEMACAL_TIMEZONE", "Asia/Tokyo")

# gmail | imap
mail_backend = os.environ.get("CINEMACAL_MAIL_BACKEND", "gmail")

# google | ics
calendar_backend = os.environ.get("CINEMACAL_CALENDAR_BACKEND", "google")

calendar_id = os.environ.get("CINEMACAL_CALENDAR_ID", "primary")
ics_path = os.environ.get("CINEMACAL_ICS_PATH", "cinemacal.ics")

google_credentials_file = os.environ.get(
    "CINEMACAL_GOOGLE_CREDENTIALS", "credentials.json"
)
google_token_file = os.environ.get("CINEMACAL_GOOGLE_TOKEN", "token.json")

imap_host = os.environ.get("CINEMACAL_IMAP_HOST", "imap.gmail.com")
imap_port = os.environ.get("CINEMACAL_IMAP_PORT", "993")
imap_user = os.environ.get("CINEMACAL_IMAP_USER", "")
imap_password = os.environ.get("CINEMACAL_IMAP_PASSWORD", "")
imap_folder = os.environ.get("CINEMACAL_IMAP_FOLDER", "INBOX")

debug = os.environ.get("CINEMACAL_DEBUG", "").lower() in ("1", "true", "yes")
