"""Pydantic models for receipt suggestions (camelCase on the wire)."""

from typing import Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class OcrSuggestion(_CamelModel):
    raw_text: str
    suggested_amount: float | None = None
    suggested_ref: str | None = None
    suggested_date_time: str | None = None
    suggested_bank: str | None = None


class SuggestRequest(_CamelModel):
    text: str | None = None


class SuggestResponse(_CamelModel):
    raw_text: str
    bank: OcrSuggestion
    cash: OcrSuggestion
    winner: Literal["bank", "cash"]
    suggestion: OcrSuggestion
    should_manual: bool
    text_score: int
