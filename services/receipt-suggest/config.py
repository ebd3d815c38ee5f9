"""Environment-based configuration for the receipt suggest service."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Receipt suggest settings, loaded from environment variables."""

    # Server
    PORT: int = 8092
    LOG_LEVEL: str = "INFO"

    # Request limits (OCR text of a single receipt is a few KB at most)
    MAX_TEXT_LENGTH: int = 50_000

    # Texts scoring below this are flagged for manual entry
    MANUAL_REVIEW_MIN_SCORE: int = 30

    model_config = {"env_prefix": "", "case_sensitive": True}


settings = Settings()
