"""Configuration management for WebDoc Chat."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Values shipped in sample env files that must not be treated as real keys
PLACEHOLDER_API_KEYS = frozenset({"dummy-key", "your-api-key-here", "changeme"})


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets copied from dashboards or env files may contain BOM characters
    that cause encoding errors when used in HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API
    google_api_key: str = ""

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000

    # Web lookup settings
    search_endpoint: str = "https://en.wikipedia.org/w/api.php"
    search_timeout: float = 5.0
    search_max_results: int = 3
    search_paragraph_limit: int = 5
    search_min_paragraph_chars: int = 50
    search_excerpt_chars: int = 2000

    # Upload settings
    pdf_extractor: Literal["heuristic", "pypdf"] = "heuristic"
    upload_prefix_bytes: int = 50_000
    upload_min_run_chars: int = 20
    upload_max_runs: int = 100
    upload_min_text_chars: int = 50
    upload_max_text_chars: int = 3000

    # Fallback replies
    fallback_excerpt_chars: int = 800

    # API
    cors_origins: list[str] = [
        "http://localhost:3000",  # Local dev
        "http://localhost:5173",  # Vite dev server
    ]
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def llm_enabled(self) -> bool:
        """Whether a usable language-model credential is configured."""
        key = self.google_api_key
        return bool(key) and key.lower() not in PLACEHOLDER_API_KEYS


# Global settings instance
settings = Settings()
