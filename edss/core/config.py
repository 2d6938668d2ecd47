"""Runtime configuration for the EDSS calculator."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for record mapping and logging, overridable via environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    field_naming: str = Field(default="default", alias="EDSS_FIELD_NAMING")
    field_suffix: str = Field(default="", alias="EDSS_FIELD_SUFFIX")
    output_column: str = Field(default="edss", alias="EDSS_OUTPUT_COLUMN")
    log_level: str = Field(default="INFO", alias="EDSS_LOG_LEVEL")

    @field_validator("log_level", mode="after")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
