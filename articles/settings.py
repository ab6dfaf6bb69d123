"""Configuration for the article admission pipeline."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, PositiveInt, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArticleSettings(BaseSettings):
    """Environment-driven settings: logging and force-save defaults."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    log_level: str = Field("INFO", alias="ARTICLES_LOG_LEVEL", description="Log level name.")
    log_json: bool = Field(False, alias="ARTICLES_LOG_JSON", description="Emit logs as JSON lines.")
    default_title: str = Field(
        "Untitled Article",
        alias="ARTICLES_DEFAULT_TITLE",
        description="Title used when a force-saved article has none.",
    )
    default_author: str = Field("Unknown", alias="ARTICLES_DEFAULT_AUTHOR", description="Fallback author.")
    default_read_time: str = Field("5 min read", alias="ARTICLES_DEFAULT_READ_TIME", description="Fallback read time.")
    default_card_number: str = Field("0", alias="ARTICLES_DEFAULT_CARD_NUMBER", description="Fallback card number.")
    word_count_min: PositiveInt = Field(2500, alias="ARTICLES_WORD_COUNT_MIN", description="Lower word-count target.")
    word_count_max: PositiveInt = Field(3500, alias="ARTICLES_WORD_COUNT_MAX", description="Upper word-count target.")

    @field_validator("default_title", "default_author", "default_read_time", "default_card_number")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        s = value.strip()
        if not s:
            raise ValueError("default values cannot be blank")
        return s

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @model_validator(mode="after")
    def _word_band_ordered(self) -> "ArticleSettings":
        if self.word_count_min > self.word_count_max:
            raise ValueError("ARTICLES_WORD_COUNT_MIN must not exceed ARTICLES_WORD_COUNT_MAX")
        return self


@lru_cache()
def get_settings() -> ArticleSettings:
    """Return the settings built from the current environment."""
    try:
        return ArticleSettings()
    except ValidationError as exc:
        raise RuntimeError(f"Article settings validation failed: {exc}") from exc


def reset_settings_cache() -> None:
    """Clear the settings cache (tests)."""
    get_settings.cache_clear()  # type: ignore[attr-defined]
