"""Cash / official-receipt parser: OR numbers, receipt numbers, amount and date."""

import logging
import re

from extraction import find_amount, find_date_time, find_digit_run, normalize_text
from models import OcrSuggestion

logger = logging.getLogger(__name__)

# Tried in order; the captured token is upper-cased
CASH_REF_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?:official\s+receipt|o\.?\s*r\.?)\s*(?:no\.?|number)?[-\s:.#]*([A-Z0-9][A-Z0-9-]{4,})\b",
        re.IGNORECASE | re.ASCII,
    ),
    re.compile(r"\breceipt\s*(?:no\.?|number|#)?[-\s:.#]*([A-Z0-9][A-Z0-9-]{4,})\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bOR[-\s:.#]*([A-Z0-9][A-Z0-9-]{4,})\b", re.IGNORECASE | re.ASCII),
)


def find_cash_ref(txt: str) -> str | None:
    """Return the OR / receipt number, or the first 6-20 digit run as fallback."""
    for pattern in CASH_REF_PATTERNS:
        m = pattern.search(txt)
        if m:
            return m.group(1).upper()
    return find_digit_run(txt)


def parse_cash_text(text: object) -> OcrSuggestion:
    """Build a suggestion from OCR text of a cash receipt. Never raises."""
    txt = normalize_text(text)

    suggestion = OcrSuggestion(
        raw_text=txt,
        suggested_amount=find_amount(txt),
        suggested_ref=find_cash_ref(txt),
        suggested_date_time=find_date_time(txt),
        suggested_bank=None,  # cash receipts carry no bank
    )
    logger.debug(
        "cash parse: %d chars, amount=%s ref=%s datetime=%s",
        len(txt),
        suggestion.suggested_amount is not None,
        suggestion.suggested_ref is not None,
        suggestion.suggested_date_time is not None,
    )
    return suggestion
