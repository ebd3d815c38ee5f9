"""Bank-transfer / e-wallet confirmation parser.

Shares amount and date-time extraction with the cash parser, but looks for
reference / confirmation / trace numbers and infers the bank or wallet name,
preferring the sending side of the transfer.
"""

import logging
import re

from extraction import find_amount, find_date_time, find_digit_run, normalize_text
from models import OcrSuggestion

logger = logging.getLogger(__name__)

# Characters scanned after a from/to marker when looking for a bank name
BANK_SEGMENT_LENGTH = 320

# Ordered: the first bank with any matching pattern wins
BANK_PATTERNS: list[tuple[str, tuple[re.Pattern, ...]]] = [
    (name, tuple(re.compile(p, re.IGNORECASE | re.ASCII) for p in patterns))
    for name, patterns in [
        ("GCash", [r"gcash"]),
        ("Maya", [r"maya", r"pay\s*maya"]),
        ("BDO", [r"\bbdo\b", r"bdo\s+unibank"]),
        ("BPI", [r"\bbpi\b", r"bank of the philippine islands"]),
        ("Metrobank", [r"metrobank"]),
        ("UnionBank", [r"union\s*bank"]),
        ("RCBC", [r"\brcbc\b"]),
        ("PNB", [r"\bpnb\b", r"philippine national bank"]),
        ("China Bank", [r"china\s*bank"]),
        ("LANDBANK", [r"land\s*bank"]),
        ("Security Bank", [r"security\s*bank"]),
        ("EastWest", [r"east\s*west"]),
        ("CIMB", [r"\bcimb\b", r"cimb\s*bank", r"octo\s+by\s+cimb"]),
        ("Tonik", [r"\btonik\b", r"tonik\s+digital\s+bank"]),
        ("MariBank", [r"\bmaribank\b", r"mari\s*bank"]),
        ("PSBank", [r"\bpsbank\b", r"\bps\s*bank\b", r"philippine\s+savings\s+bank"]),
    ]
]

_FROM_MARKERS = (
    re.compile(r"\b(?:transfer\s+from|from)\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\b(?:sender|payer|source\s+account)\b", re.IGNORECASE | re.ASCII),
)
_TO_MARKERS = (
    re.compile(r"\b(?:transfer\s+to|to)\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\b(?:recipient|beneficiary)\b", re.IGNORECASE | re.ASCII),
)

# A from/to segment ends at the earliest of these
_SEGMENT_BOUNDARIES = tuple(
    re.compile(p, re.IGNORECASE | re.ASCII)
    for p in [
        r"\btransfer\s+to\b",
        r"\bto\b",
        r"\bbeneficiary\b",
        r"\brecipient\b",
        r"\bacct\.?\b",
        r"\baccount\b",
        r"\baccount\s*no\.?\b",
        r"\bref(?:erence)?\b",
        r"\bamount\b",
        r"\bdate\b",
        r"\btime\b",
        r"\bmethod\b",
        r"\bprocessing\b",
    ]
)

BANK_REF_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE | re.ASCII)
    for p in [
        r"\bref(?:erence)?\b[-\s:.#]*(?:no\.?|number|id)?\s*([A-Z0-9][A-Z0-9-]{5,})\b",
        r"\bconf(?:irmation)?\b\s*(?:no\.?|number|id)?[-\s:.#]+([A-Z0-9][A-Z0-9-]{5,})\b",
        r"\b(?:txn|trans(?:action)?)\b\s*(?:id|no|code)?[-\s:.#]+([A-Z0-9][A-Z0-9-]{5,})\b",
        r"\btrace\b\s*(?:no\.?|number|id)?[-\s:.#]+([A-Z0-9][A-Z0-9-]{5,})\b",
    ]
)


def find_bank_ref(txt: str) -> str | None:
    """Return a labeled reference / confirmation / trace number, else a 6-20 digit run."""
    for pattern in BANK_REF_PATTERNS:
        m = pattern.search(txt)
        if m:
            return m.group(1).upper()
    return find_digit_run(txt)


def bank_name_in(segment: str) -> str | None:
    """Return the first known bank mentioned anywhere in ``segment``."""
    for name, patterns in BANK_PATTERNS:
        if any(p.search(segment) for p in patterns):
            return name
    return None


def slice_after_marker(txt: str, marker: re.Pattern) -> str | None:
    """Text following ``marker``, cut at the earliest boundary keyword.

    Tolerates OCR noise like "To (eo) ...", "Acct.", "Account No.".
    """
    m = marker.search(txt)
    if not m:
        return None
    rest = txt[m.end():m.end() + BANK_SEGMENT_LENGTH]

    end = len(rest)
    for boundary in _SEGMENT_BOUNDARIES:
        b = boundary.search(rest)
        if b and b.start() < end:
            end = b.start()
    return rest[:end]


def _first_segment(txt: str, markers: tuple[re.Pattern, ...]) -> str | None:
    for marker in markers:
        segment = slice_after_marker(txt, marker)
        if segment:
            return segment
    return None


def infer_bank(txt: str) -> str | None:
    """Bank on the sending side, else the receiving side, else anywhere in the text."""
    for markers in (_FROM_MARKERS, _TO_MARKERS):
        segment = _first_segment(txt, markers)
        if segment:
            name = bank_name_in(segment)
            if name:
                return name
    return bank_name_in(txt)


def parse_bank_text(text: object) -> OcrSuggestion:
    """Build a suggestion from OCR text of a bank transfer confirmation. Never raises."""
    txt = normalize_text(text)

    suggestion = OcrSuggestion(
        raw_text=txt,
        suggested_amount=find_amount(txt),
        suggested_ref=find_bank_ref(txt),
        suggested_date_time=find_date_time(txt),
        suggested_bank=infer_bank(txt),
    )
    logger.debug(
        "bank parse: %d chars, amount=%s ref=%s datetime=%s bank=%s",
        len(txt),
        suggestion.suggested_amount is not None,
        suggestion.suggested_ref is not None,
        suggestion.suggested_date_time is not None,
        suggestion.suggested_bank,
    )
    return suggestion
