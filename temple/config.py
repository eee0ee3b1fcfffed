"""Runtime settings read from ``TEMPLE_*`` environment variables or ``.env``."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    draw_delay_ms: int = Field(default=2000, ge=0)  # lucky-dip animation
    history_limit: int = Field(default=500, gt=0)
    log_level: str = Field(default="INFO")
    seed_file: Optional[Path] = Field(default=None)

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="TEMPLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
