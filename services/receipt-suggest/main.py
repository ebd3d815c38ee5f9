"""FastAPI receipt suggest service — turns receipt OCR text into form suggestions.

OCR happens upstream; this service only parses text. Receipt text is never
logged, only its length.
"""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from bank import parse_bank_text
from cash import parse_cash_text
from config import settings
from models import OcrSuggestion, SuggestRequest, SuggestResponse
from suggestion import suggest_from_text

SERVICE_VERSION = "1.0.0"

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Receipt Suggest", version=SERVICE_VERSION)


def _too_long(req: SuggestRequest) -> JSONResponse | None:
    length = len(req.text or "")
    if length > settings.MAX_TEXT_LENGTH:
        logger.warning("Rejected text of %d chars (limit %d)", length, settings.MAX_TEXT_LENGTH)
        return JSONResponse(
            status_code=413,
            content={"detail": f"Text exceeds {settings.MAX_TEXT_LENGTH} characters"},
        )
    return None


@app.post("/api/v1/suggest", response_model=SuggestResponse)
def suggest(req: SuggestRequest):
    """Parse text as both bank transfer and cash receipt and pick a winner."""
    rejected = _too_long(req)
    if rejected is not None:
        return rejected

    logger.info("Processing suggestion: text=%d chars", len(req.text or ""))
    return suggest_from_text(req.text)


@app.post("/api/v1/parse/cash", response_model=OcrSuggestion)
def parse_cash(req: SuggestRequest):
    """Parse text as a cash / official receipt."""
    rejected = _too_long(req)
    if rejected is not None:
        return rejected
    return parse_cash_text(req.text)


@app.post("/api/v1/parse/bank", response_model=OcrSuggestion)
def parse_bank(req: SuggestRequest):
    """Parse text as a bank transfer confirmation."""
    rejected = _too_long(req)
    if rejected is not None:
        return rejected
    return parse_bank_text(req.text)


@app.get("/health")
def health():
    return {"status": "healthy", "version": SERVICE_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
