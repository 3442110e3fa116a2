"""
Token-based date parsing and formatting.

Format strings use Unicode (LDML) field tokens, the same notation export
templates are written in (``yyyy-MM-dd``, ``dd MMM yyyy HH:mm``). Text in
single quotes is literal, ``''`` is a quote character, and letters that
are not a known token are copied literally.

Supported tokens:
    yyyy, yy, y         year (4 digits, 2 digits, unpadded)
    MMMM, MMM, MM, M    month (name, abbreviation, padded, unpadded); L* alike
    dd, d               day of month
    EEEE, EEE           weekday (name, abbreviation); c* alike, ignored on parse
    HH, H, hh, h, a     hour (24h, 12h) and AM/PM marker
    mm, m, ss, s        minute, second
    SSS, S              millisecond
    ZZZ, ZZ, Z          UTC offset (+0500, +05:00, +5)
    z                   zone name

Example:
    >>> parsed = parse_datetime("2024-01-05", "yyyy-MM-dd", "UTC")
    >>> format_datetime(parsed, "MM/dd/yyyy")
    '01/05/2024'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Callable, Dict, List, Optional, Tuple

from dateutil import tz

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)

# Two-digit years above the pivot belong to the 1900s.
TWO_DIGIT_YEAR_PIVOT = 60

_OFFSET_PATTERN = r"Z|[+-]\d{1,2}(?::?\d{2})?"
_OFFSET_RE = re.compile(r"([+-])(\d{1,2})(?::?(\d{2}))?")


class DateFormatError(ValueError):
    """Raised when text does not match a format or a zone is unknown."""


@dataclass(frozen=True)
class FormatToken:
    text: str
    literal: bool


def tokenize(fmt: str) -> List[FormatToken]:
    """Split a format string into field tokens and literal runs."""
    tokens: List[FormatToken] = []
    literal: List[str] = []

    def flush() -> None:
        if literal:
            tokens.append(FormatToken("".join(literal), True))
            literal.clear()

    index = 0
    length = len(fmt)
    while index < length:
        char = fmt[index]
        if fmt.startswith("''", index):
            literal.append("'")
            index += 2
        elif char == "'":
            end = fmt.find("'", index + 1)
            if end == -1:
                end = length
            literal.append(fmt[index + 1 : end])
            index = end + 1
        elif char.isascii() and char.isalpha():
            end = index
            while end < length and fmt[end] == char:
                end += 1
            flush()
            tokens.append(FormatToken(fmt[index:end], False))
            index = end
        else:
            literal.append(char)
            index += 1

    flush()
    return tokens


def _names_pattern(names: Tuple[str, ...]) -> str:
    return "|".join(sorted(names, key=len, reverse=True))


# token -> (regex, parsed field); a None field is matched but ignored
_PARSE_FIELDS: Dict[str, Tuple[str, Optional[str]]] = {
    "yyyy": (r"\d{4}", "year"),
    "yy": (r"\d{2}", "two_digit_year"),
    "y": (r"\d{1,6}", "year"),
    "MMMM": (_names_pattern(MONTH_NAMES), "month_name"),
    "MMM": (_names_pattern(MONTH_ABBREVIATIONS), "month_name"),
    "MM": (r"\d{2}", "month"),
    "M": (r"\d{1,2}", "month"),
    "LLLL": (_names_pattern(MONTH_NAMES), "month_name"),
    "LLL": (_names_pattern(MONTH_ABBREVIATIONS), "month_name"),
    "LL": (r"\d{2}", "month"),
    "L": (r"\d{1,2}", "month"),
    "dd": (r"\d{2}", "day"),
    "d": (r"\d{1,2}", "day"),
    "EEEE": (_names_pattern(WEEKDAY_NAMES), None),
    "EEE": (_names_pattern(WEEKDAY_ABBREVIATIONS), None),
    "cccc": (_names_pattern(WEEKDAY_NAMES), None),
    "ccc": (_names_pattern(WEEKDAY_ABBREVIATIONS), None),
    "HH": (r"\d{2}", "hour"),
    "H": (r"\d{1,2}", "hour"),
    "hh": (r"\d{2}", "hour12"),
    "h": (r"\d{1,2}", "hour12"),
    "a": (r"AM|PM", "meridiem"),
    "mm": (r"\d{2}", "minute"),
    "m": (r"\d{1,2}", "minute"),
    "ss": (r"\d{2}", "second"),
    "s": (r"\d{1,2}", "second"),
    "SSS": (r"\d{3}", "millisecond"),
    "S": (r"\d{1,3}", "millisecond"),
    "ZZZ": (_OFFSET_PATTERN, "offset"),
    "ZZ": (_OFFSET_PATTERN, "offset"),
    "Z": (_OFFSET_PATTERN, "offset"),
    "z": (r"[A-Za-z_]+(?:/[A-Za-z_+\-]+)*", "zone"),
}


def resolve_zone(name: Any) -> tzinfo:
    """Resolve a zone name (IANA name, ``UTC`` or ``local``) to a tzinfo."""
    zone_name = str(name)
    if zone_name.lower() == "utc":
        return tz.UTC
    if zone_name.lower() in ("local", "system"):
        return tz.tzlocal()
    zone = tz.gettz(zone_name)
    if zone is None:
        raise DateFormatError(f"Unknown time zone: {zone_name}")
    return zone


def _parse_offset(raw: str) -> timedelta:
    if raw.upper() == "Z":
        return timedelta(0)
    match = _OFFSET_RE.fullmatch(raw)
    if match is None:
        raise DateFormatError(f"Invalid UTC offset: {raw}")
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return -delta if sign == "-" else delta


def parse_datetime(text: str, fmt: str, zone: Any = "UTC") -> datetime:
    """
    Parse text with a token format, interpreting wall time in ``zone``.

    Missing fields default to the current year, January, the 1st and
    midnight. A parsed offset or zone name is honoured and the result is
    converted into ``zone``.

    Raises:
        DateFormatError: If the text does not match the format or the zone is unknown
        ValueError: If the parsed fields do not form a valid date
    """
    target = resolve_zone(zone)

    pattern_parts: List[str] = []
    groups: List[Tuple[str, Optional[str]]] = []
    for index, token in enumerate(tokenize(fmt)):
        spec = None if token.literal else _PARSE_FIELDS.get(token.text)
        if spec is None:
            pattern_parts.append(re.escape(token.text))
            continue
        pattern, field_name = spec
        group = f"g{index}"
        pattern_parts.append(f"(?P<{group}>{pattern})")
        groups.append((group, field_name))

    match = re.fullmatch("".join(pattern_parts), text, re.IGNORECASE)
    if match is None:
        raise DateFormatError(f"'{text}' does not match format '{fmt}'")

    fields: Dict[str, str] = {}
    for group, field_name in groups:
        if field_name is not None:
            fields[field_name] = match.group(group)

    now = datetime.now(target)
    year = now.year
    if "year" in fields:
        year = int(fields["year"])
    elif "two_digit_year" in fields:
        short_year = int(fields["two_digit_year"])
        year = short_year + (1900 if short_year > TWO_DIGIT_YEAR_PIVOT else 2000)

    month = 1
    if "month" in fields:
        month = int(fields["month"])
    elif "month_name" in fields:
        prefix = fields["month_name"][:3].lower()
        month = [name.lower() for name in MONTH_ABBREVIATIONS].index(prefix) + 1

    hour = int(fields.get("hour", 0))
    if "hour12" in fields:
        hour = int(fields["hour12"])
        meridiem = fields.get("meridiem")
        if meridiem is not None:
            hour = hour % 12 + (12 if meridiem.upper() == "PM" else 0)

    if "offset" in fields:
        source: tzinfo = timezone(_parse_offset(fields["offset"]))
    elif "zone" in fields:
        source = resolve_zone(fields["zone"])
    else:
        source = target

    parsed = datetime(
        year,
        month,
        int(fields.get("day", 1)),
        hour,
        int(fields.get("minute", 0)),
        int(fields.get("second", 0)),
        int(fields.get("millisecond", 0)) * 1000,
        tzinfo=source,
    )
    return parsed if source is target else parsed.astimezone(target)


def _format_offset(value: datetime, style: str) -> str:
    offset = value.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    if style == "ZZZ":
        return f"{sign}{hours:02d}{minutes:02d}"
    if style == "ZZ":
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours}" if minutes == 0 else f"{sign}{hours}:{minutes:02d}"


def _hour12(value: datetime) -> int:
    return value.hour % 12 or 12


Renderer = Callable[[datetime, Optional[str]], str]

_RENDERERS: Dict[str, Renderer] = {
    "yyyy": lambda dt, _: f"{dt.year:04d}",
    "yy": lambda dt, _: f"{dt.year % 100:02d}",
    "y": lambda dt, _: str(dt.year),
    "MMMM": lambda dt, _: MONTH_NAMES[dt.month - 1],
    "MMM": lambda dt, _: MONTH_ABBREVIATIONS[dt.month - 1],
    "MM": lambda dt, _: f"{dt.month:02d}",
    "M": lambda dt, _: str(dt.month),
    "LLLL": lambda dt, _: MONTH_NAMES[dt.month - 1],
    "LLL": lambda dt, _: MONTH_ABBREVIATIONS[dt.month - 1],
    "LL": lambda dt, _: f"{dt.month:02d}",
    "L": lambda dt, _: str(dt.month),
    "dd": lambda dt, _: f"{dt.day:02d}",
    "d": lambda dt, _: str(dt.day),
    "EEEE": lambda dt, _: WEEKDAY_NAMES[dt.weekday()],
    "EEE": lambda dt, _: WEEKDAY_ABBREVIATIONS[dt.weekday()],
    "cccc": lambda dt, _: WEEKDAY_NAMES[dt.weekday()],
    "ccc": lambda dt, _: WEEKDAY_ABBREVIATIONS[dt.weekday()],
    "HH": lambda dt, _: f"{dt.hour:02d}",
    "H": lambda dt, _: str(dt.hour),
    "hh": lambda dt, _: f"{_hour12(dt):02d}",
    "h": lambda dt, _: str(_hour12(dt)),
    "a": lambda dt, _: "AM" if dt.hour < 12 else "PM",
    "mm": lambda dt, _: f"{dt.minute:02d}",
    "m": lambda dt, _: str(dt.minute),
    "ss": lambda dt, _: f"{dt.second:02d}",
    "s": lambda dt, _: str(dt.second),
    "SSS": lambda dt, _: f"{dt.microsecond // 1000:03d}",
    "S": lambda dt, _: str(dt.microsecond // 1000),
    "ZZZ": lambda dt, _: _format_offset(dt, "ZZZ"),
    "ZZ": lambda dt, _: _format_offset(dt, "ZZ"),
    "Z": lambda dt, _: _format_offset(dt, "Z"),
    "z": lambda dt, zone_name: zone_name or dt.tzname() or "",
}


def format_datetime(value: datetime, fmt: str, zone_name: Optional[str] = None) -> str:
    """Render a datetime with a token format."""
    rendered: List[str] = []
    for token in tokenize(fmt):
        renderer = None if token.literal else _RENDERERS.get(token.text)
        rendered.append(token.text if renderer is None else renderer(value, zone_name))
    return "".join(rendered)


__all__ = [
    "DateFormatError",
    "FormatToken",
    "format_datetime",
    "parse_datetime",
    "resolve_zone",
    "tokenize",
]
