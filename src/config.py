"""
Habit Tracker — Centralized configuration.

Loads settings from .env and validates them.
Every module reads configuration through the `settings` singleton.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

# Load .env from project root (two levels up from src/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # IANA zone deciding what "today" is; empty → system local date
    TIMEZONE: str = ""

    # Create form validation message
    EMPTY_NAME_ERROR: str = "Name cannot be empty"

    # strftime pattern for each end of the week range label
    WEEK_LABEL_FORMAT: str = "%d %b"

    @field_validator("TIMEZONE", mode="before")
    @classmethod
    def check_timezone(cls, v: str | None) -> str:
        v = (v or "").strip()
        if not v:
            return ""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v!r}") from exc
        return v

    @field_validator("EMPTY_NAME_ERROR", mode="before")
    @classmethod
    def default_error_text(cls, v: str | None) -> str:
        return v or "Name cannot be empty"


def _load_settings() -> Settings:
    """Load settings from environment, exiting on invalid values."""
    try:
        return Settings(
            TIMEZONE=os.getenv("TIMEZONE", ""),
            EMPTY_NAME_ERROR=os.getenv("EMPTY_NAME_ERROR", "Name cannot be empty"),
            WEEK_LABEL_FORMAT=os.getenv("WEEK_LABEL_FORMAT", "%d %b"),
        )
    except ValidationError as exc:
        print(f"ERROR: invalid configuration in .env: {exc}", file=sys.stderr)
        sys.exit(1)


# Singleton — imported by all other modules as:
#   from src.config import settings
settings = _load_settings()
