"""Field extractors shared by the cash and bank receipt parsers.

All functions operate on whitespace-normalized OCR text and return None
instead of raising when nothing plausible is found. Each extractor walks an
ordered list of matchers and stops at the first tier that yields a result.
"""

import math
import re
from dataclasses import dataclass
from typing import Callable, Iterable

# Max non-digit characters between an amount label and its number
AMOUNT_LABEL_WINDOW = 20
# Bare numbers below this are more likely IDs, quantities or date parts
MIN_BARE_AMOUNT = 100
# Time search window around the end of the matched date
TIME_WINDOW_BEFORE = 80
TIME_WINDOW_AFTER = 160

MONTHS: dict[str, int] = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Digits and word boundaries are ASCII-only everywhere; whitespace is not
_WHITESPACE_RE = re.compile(r"\s+")
_DIGIT_RUN_RE = re.compile(r"\b\d{6,20}\b", re.ASCII)

# --- amount patterns ---

_NUMBER = r"(\d[\d,]*(?:\.\d{1,2})?)"

_LABELED_AMOUNT_RE = re.compile(
    r"\b(?:transfer\s+amount|amount|amt|sent)\b"
    r"[^0-9₱p]{0," + str(AMOUNT_LABEL_WINDOW) + r"}"
    r"(?:₱|\bPH(?:P|p))?\s*" + _NUMBER,
    re.IGNORECASE | re.ASCII,
)
# "PHP" may be glued to the number ("PHP9,000.00")
_CURRENCY_AMOUNT_RE = re.compile(r"(?:₱\s*|\bPH(?:P|p)\s*)" + _NUMBER, re.IGNORECASE | re.ASCII)
# Comma-grouped or 4-6 plain digits; longer unformatted runs are IDs
_BARE_AMOUNT_RE = re.compile(r"\b(?:\d{1,3}(?:,\d{3})+|\d{4,6})(?:\.\d{1,2})?\b", re.ASCII)

# --- date patterns ---

_MONTH_NAME = (
    r"(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?"
    r"|aug(?:ust)?|sep(?:t|tember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

# "Sep-21-2025", "Sep 21, 2025"
_MONTH_DAY_YEAR_RE = re.compile(
    r"\b" + _MONTH_NAME + r"[-\s]+(\d{1,2})[-\s,]+(20\d{2})\b", re.IGNORECASE | re.ASCII
)
# "Sep 26 Date and 2025"
_MONTH_DAY_NOISY_YEAR_RE = re.compile(
    r"\b" + _MONTH_NAME + r"\s+(\d{1,2})[^0-9]{0,20}(20\d{2})\b", re.IGNORECASE | re.ASCII
)
_ISO_DATE_RE = re.compile(r"\b(20\d{2})[-/](\d{1,2})[-/](\d{1,2})\b", re.ASCII)
_NUMERIC_DATE_RE = re.compile(r"\b(\d{1,2})[./-](\d{1,2})[./-](20\d{2})\b", re.ASCII)
# "21 Sep 2025", "28th March, 2026"
_DAY_MONTH_YEAR_RE = re.compile(
    r"\b(\d{1,2})\s+" + _MONTH_NAME + r"[a-z]*,?\s*(20\d{2})\b", re.IGNORECASE | re.ASCII
)

# --- time patterns ---

_TIME_12H_RE = re.compile(
    r"\b(\d{1,2}):([0-5]\d)(?::([0-5]\d))?\s*([AaPp]\s*\.?\s*[Mm])\b", re.ASCII
)
_TIME_24H_RE = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)(?::[0-5]\d)?\b", re.ASCII)


@dataclass(frozen=True)
class DateSpan:
    """A located date: canonical YYYY-MM-DD plus its [start, end) offsets."""

    ymd: str
    start: int
    end: int


def normalize_text(text: object) -> str:
    """Collapse whitespace runs to single spaces and trim.

    Anything that is not a string (None included) normalizes to "".
    """
    if not isinstance(text, str):
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


# ---------- amount ----------

def _to_number(token: str) -> float | None:
    try:
        value = float(token.replace(",", ""))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_all(tokens: Iterable[str]) -> list[float]:
    return [n for n in map(_to_number, tokens) if n is not None]


def _labeled_amounts(txt: str) -> list[float]:
    return _parse_all(m.group(1) for m in _LABELED_AMOUNT_RE.finditer(txt))


def _currency_amounts(txt: str) -> list[float]:
    return _parse_all(m.group(1) for m in _CURRENCY_AMOUNT_RE.finditer(txt))


def _bare_amounts(txt: str) -> list[float]:
    numbers = _parse_all(m.group(0) for m in _BARE_AMOUNT_RE.finditer(txt))
    return [n for n in numbers if n >= MIN_BARE_AMOUNT]


_AMOUNT_TIERS: tuple[Callable[[str], list[float]], ...] = (
    _labeled_amounts,
    _currency_amounts,
    _bare_amounts,
)


def find_amount(txt: str) -> float | None:
    """Return the largest amount from the first tier that has any candidate."""
    for tier in _AMOUNT_TIERS:
        candidates = tier(txt)
        if candidates:
            return max(candidates)
    return None


# ---------- date ----------

def _month_number(name: str) -> int | None:
    return MONTHS.get(name[:3].lower())


def _ymd(year: int, month: int | None, day: int) -> str | None:
    if month is None or not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"


def _month_first(m: re.Match) -> tuple[int, int | None, int]:
    return int(m.group(3)), _month_number(m.group(1)), int(m.group(2))


def _year_first(m: re.Match) -> tuple[int, int | None, int]:
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _ambiguous_numeric(m: re.Match) -> tuple[int, int | None, int]:
    # First component is the month whenever it can be one
    a, b, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if a <= 12:
        return year, a, b
    return year, b, a


def _day_first(m: re.Match) -> tuple[int, int | None, int]:
    return int(m.group(3)), _month_number(m.group(2)), int(m.group(1))


_DATE_MATCHERS: tuple[tuple[re.Pattern, Callable[[re.Match], tuple[int, int | None, int]]], ...] = (
    (_MONTH_DAY_YEAR_RE, _month_first),
    (_MONTH_DAY_NOISY_YEAR_RE, _month_first),
    (_ISO_DATE_RE, _year_first),
    (_NUMERIC_DATE_RE, _ambiguous_numeric),
    (_DAY_MONTH_YEAR_RE, _day_first),
)


def find_date_span(txt: str) -> DateSpan | None:
    """Locate the first date, trying each format in priority order.

    Matches whose month or day is out of range are skipped.
    """
    for pattern, fields in _DATE_MATCHERS:
        # A bad match ("13/45/2026") must not hide a valid later one in the same format
        for m in pattern.finditer(txt):
            ymd = _ymd(*fields(m))
            if ymd is not None:
                return DateSpan(ymd=ymd, start=m.start(), end=m.end())
    return None


# ---------- time ----------

def to_24h(hour: int, minute: int, meridiem: str | None = None) -> str:
    """Format a clock time as HH:MM, converting from 12-hour when a marker is given."""
    if meridiem:
        marker = re.sub(r"[^a-z]", "", meridiem.lower())
        if marker == "am" and hour == 12:
            hour = 0
        elif marker == "pm" and hour < 12:
            hour += 12
    return f"{hour:02d}:{minute:02d}"


def find_time_near(txt: str, anchor: int | None = None) -> str | None:
    """Find a clock time, preferring one close to ``anchor``.

    With an anchor, only the window 80 chars before to 160 chars after it is
    searched first; on a miss the whole text is searched once more.
    """
    if anchor is None:
        segment = txt
    else:
        start = max(0, anchor - TIME_WINDOW_BEFORE)
        end = min(len(txt), anchor + TIME_WINDOW_AFTER)
        segment = txt[start:end]

    t = _TIME_12H_RE.search(segment)
    if t:
        hour, minute = int(t.group(1)), int(t.group(2))
        if 1 <= hour <= 12 and minute <= 59:
            return to_24h(hour, minute, t.group(4))

    t = _TIME_24H_RE.search(segment)
    if t:
        return to_24h(int(t.group(1)), int(t.group(2)))

    if anchor is not None:
        return find_time_near(txt)
    return None


def combine_date_time(span: DateSpan | None, time: str | None) -> str | None:
    """Join date and time as YYYY-MM-DDTHH:MM; None unless both are present."""
    if span is None or time is None:
        return None
    return f"{span.ymd}T{time}"


def find_date_time(txt: str) -> str | None:
    """Locate a date, then the time nearest to it, and combine them."""
    span = find_date_span(txt)
    time = find_time_near(txt, span.end if span else None)
    return combine_date_time(span, time)


def find_digit_run(txt: str) -> str | None:
    """First standalone run of 6-20 digits, used as a last-resort reference."""
    m = _DIGIT_RUN_RE.search(txt)
    return m.group(0) if m else None
