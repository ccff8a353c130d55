"""Runtime settings loaded from ``GEODASH_*`` environment variables and ``.env``."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geodash.models import PAGE_SIZES

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Dashboard configuration. Every field maps to a ``GEODASH_*`` variable."""

    # Data
    record_count: int = Field(5000, ge=0)
    seed: int | None = None

    # Timing
    fetch_delay_ms: int = Field(300, ge=0)  # Simulated network latency
    debounce_ms: int = Field(300, ge=0)  # Quiet period before a filter edit triggers a fetch

    # Table
    page_size: int = 50

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="GEODASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    @field_validator("page_size")
    @classmethod
    def _known_page_size(cls, value: int) -> int:
        if value not in PAGE_SIZES:
            raise ValueError(f"must be one of {PAGE_SIZES}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {_LOG_LEVELS}")
        return level

    @property
    def fetch_delay(self) -> float:
        return self.fetch_delay_ms / 1000

    @property
    def debounce_delay(self) -> float:
        return self.debounce_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached Settings so the environment is parsed once per process."""
    return Settings()


__all__ = ["Settings", "get_settings"]
