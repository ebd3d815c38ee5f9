"""Run both parsers over one OCR text and pick the more complete suggestion."""

import logging
import re

from bank import parse_bank_text
from cash import parse_cash_text
from config import settings
from extraction import normalize_text
from models import OcrSuggestion, SuggestResponse

logger = logging.getLogger(__name__)

_DIGIT_RE = re.compile(r"\d", re.ASCII)
_CURRENCY_RE = re.compile(r"(?:₱|\bPH(?:P|p)\b)", re.ASCII)
_KEYWORD_RE = re.compile(
    r"\b(amount|total|ref|reference|txn|transaction|official\s+receipt|invoice|date|time)\b",
    re.IGNORECASE | re.ASCII,
)


def score_receipt_text(text: str) -> int:
    """Rough signal of whether OCR text is worth trusting."""
    if not text:
        return 0
    digits = len(_DIGIT_RE.findall(text))
    currency = len(_CURRENCY_RE.findall(text))
    keywords = len(_KEYWORD_RE.findall(text))
    return digits + currency * 5 + keywords * 4


def score_suggestion(s: OcrSuggestion) -> int:
    return (
        (3 if s.suggested_amount is not None else 0)
        + (3 if s.suggested_ref is not None else 0)
        + (1 if s.suggested_date_time is not None else 0)
        + (1 if s.suggested_bank is not None else 0)
    )


def _has_core_fields(s: OcrSuggestion) -> bool:
    return any(v is not None for v in (s.suggested_amount, s.suggested_ref, s.suggested_date_time))


def suggest_from_text(text: object, min_text_score: int | None = None) -> SuggestResponse:
    """Parse ``text`` as both a bank transfer and a cash receipt.

    The bank result wins ties. ``should_manual`` is set when the text itself
    scores below ``min_text_score`` (default from settings) or neither parser
    found an amount, reference or date-time.
    """
    raw = normalize_text(text)
    bank = parse_bank_text(raw)
    cash = parse_cash_text(raw)

    if score_suggestion(bank) >= score_suggestion(cash):
        winner, suggestion = "bank", bank
    else:
        winner, suggestion = "cash", cash

    threshold = settings.MANUAL_REVIEW_MIN_SCORE if min_text_score is None else min_text_score
    text_score = score_receipt_text(raw)
    should_manual = text_score < threshold or not (_has_core_fields(bank) or _has_core_fields(cash))

    logger.info(
        "Suggestion: winner=%s text_score=%d manual=%s",
        winner, text_score, should_manual,
    )
    return SuggestResponse(
        raw_text=raw,
        bank=bank,
        cash=cash,
        winner=winner,
        suggestion=suggestion,
        should_manual=should_manual,
        text_score=text_score,
    )
