"""Application configuration."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("LIFTER_NUTRITION_ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Runtime settings; every field has a built-in default."""

    report_path: str = "report.txt"
    console_width: int = 75
    log_level: str = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="LIFTER_NUTRITION_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_log_level(raw: str | None) -> int:
    """Map a level name such as ``debug`` to a logging level."""
    if raw is None:
        return logging.WARNING
    cleaned = raw.strip().upper()
    level = logging.getLevelName(cleaned)
    if isinstance(level, int):
        return level
    return logging.WARNING
