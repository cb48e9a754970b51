import arrow
import re
from dataclasses import dataclass
from typing import Iterable

DEFAULT_TZINFO = "Asia/Tokyo"

# Cinema City e-ticket confirmation mail
BODY_PATTERN = re.compile(
    r"■チケット番号：(?P<ticket_number>\d+)\r?\n"
    r"■登録電話番号：\d+（下4ケタのみでOK）\r?\n"
    r"\r?\n"
    r"(?P<title>[^\r\n]+)\r?\n"
    r"■上映時間\r?\n"
    r"(?P<date>[^\r\n]+)\r?\n"
    r"■劇場 （ワン：高島屋右隣／ツー：モノレール下遊歩道沿）\r?\n"
    r"(?P<theater>[^\r\n]+)\r?\n"
    r"■座席\r?\n"
    r"(?P<sheet>[^■\r\n][^\r\n]*(?:\r?\n[^■\r\n][^\r\n]*)*)\r?\n",
    re.ASCII,
)

# 2024年5月3日(金) 18:30 - 20:45
DATE_PATTERN = re.compile(
    r"(?P<year>\d+)年(?P<month>\d+)月(?P<day>\d+)日\((?P<weekday>.)\) "
    r"(?P<start_hour>\d\d):(?P<start_minute>\d\d) - "
    r"(?P<end_hour>\d\d):(?P<end_minute>\d\d)",
    re.ASCII,
)

NO_MATCH_TEMPLATE = "template"
NO_MATCH_DATE = "date"


@dataclass(frozen=True)
class Ticket:
    ticket_number: str
    title: str
    start_time: arrow.Arrow
    end_time: arrow.Arrow
    theater: str
    sheet: str


@dataclass(frozen=True)
class NoMatch:
    reason: str


def build_time(
    year: int, month: int, day: int, hour: int, minute: int, tzinfo: str
) -> arrow.Arrow:
    # Out-of-range fields carry over into the next unit (month 13 is next January)
    return arrow.get(year, 1, 1, tzinfo=tzinfo).shift(
        months=month - 1, days=day - 1, hours=hour, minutes=minute
    )


def parse_body(body: str, tzinfo: str = DEFAULT_TZINFO) -> Ticket | NoMatch:
    """
    Extract a ticket from the plain-text body of a confirmation mail.

    Args:
        body: Plain-text mail body
        tzinfo: Timezone the screening time is given in

    Returns:
        Ticket | NoMatch: NoMatch when the body is not a confirmation mail
        or its screening time cannot be read
    """
    parsed = BODY_PATTERN.search(body)
    if parsed is None:
        return NoMatch(NO_MATCH_TEMPLATE)

    parsed_date = DATE_PATTERN.search(parsed.group("date"))
    if parsed_date is None:
        return NoMatch(NO_MATCH_DATE)

    year = int(parsed_date.group("year"))
    month = int(parsed_date.group("month"))
    day = int(parsed_date.group("day"))

    try:
        start_time = build_time(
            year,
            month,
            day,
            int(parsed_date.group("start_hour")),
            int(parsed_date.group("start_minute")),
            tzinfo,
        )
        end_time = build_time(
            year,
            month,
            day,
            int(parsed_date.group("end_hour")),
            int(parsed_date.group("end_minute")),
            tzinfo,
        )
    except (ValueError, OverflowError):
        # year 0 and beyond 9999
        return NoMatch(NO_MATCH_DATE)

    return Ticket(
        ticket_number=parsed.group("ticket_number"),
        title=parsed.group("title"),
        start_time=start_time,
        end_time=end_time,
        theater=parsed.group("theater"),
        sheet=parsed.group("sheet"),
    )


def extract_tickets(
    bodies: Iterable[str], tzinfo: str = DEFAULT_TZINFO
) -> tuple[list[Ticket], list[NoMatch]]:
    tickets: list[Ticket] = []
    skipped: list[NoMatch] = []
    for body in bodies:
        result = parse_body(body, tzinfo)
        if type(result) is Ticket:
            tickets.append(result)
        else:
            skipped.append(result)

    return tickets, skipped
