"""Calendar helpers — week anchors, the current date, week labels.

No I/O: this module only transforms dates.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from src.config import settings

DAYS_IN_WEEK = 7


def today() -> date:
    """Return the current date in the configured TIMEZONE (system local if unset)."""
    if settings.TIMEZONE:
        return datetime.now(ZoneInfo(settings.TIMEZONE)).date()
    return date.today()


def week_start(day: date) -> date:
    """Return the Monday on or before `day`.

    Sunday maps to the Monday six days earlier, never to itself.
    """
    return day - timedelta(days=day.isoweekday() - 1)


def week_days(start: date) -> list[date]:
    """The seven consecutive dates beginning at `start`."""
    return [start + timedelta(days=offset) for offset in range(DAYS_IN_WEEK)]


def shift_week(anchor: date, forward: bool) -> date:
    """Move `anchor` one week forward or back, keeping its weekday."""
    step = timedelta(weeks=1)
    return anchor + step if forward else anchor - step


def _format_day(day: date) -> str:
    return day.strftime(settings.WEEK_LABEL_FORMAT).lstrip("0")


def week_range_label(start: date) -> str:
    """Human label for the 7-day window, e.g. "2 Feb - 8 Feb"."""
    end = start + timedelta(days=DAYS_IN_WEEK - 1)
    return f"{_format_day(start)} - {_format_day(end)}"
