"""
Habit Tracker — Data Models.

A Habit is an immutable value: every change (toggle, rename) produces a new
instance through the store. Completion history is sparse; a missing date
and an explicit False both mean "not completed".
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from src.core.dates import DAYS_IN_WEEK, today as current_date, week_days


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class DayProgress:
    """One cell of a habit's week: completion and whether it is today."""

    date: date
    is_completed: bool
    is_today: bool

    @property
    def is_clickable(self) -> bool:
        # Only today's cell accepts a toggle
        return self.is_today


@dataclass(frozen=True)
class Habit:
    """A user-tracked recurring activity.

    Constructed from a name alone; id and history get defaults.
    """

    name: str
    id: str = field(default_factory=_new_id)
    completion_history: dict[date, bool] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Own a private copy so callers can't mutate history behind our back
        object.__setattr__(self, "completion_history", dict(self.completion_history))

    def is_completed_on(self, day: date) -> bool:
        return self.completion_history.get(day, False)

    def week_progress(self, start: date, today: date | None = None) -> list[DayProgress]:
        """Return exactly seven DayProgress entries for start .. start+6.

        Args:
            start: First day of the window (normally a Monday).
            today: Date to flag as today; defaults to the current date.
        """
        if today is None:
            today = current_date()
        return [
            DayProgress(date=d, is_completed=self.is_completed_on(d), is_today=d == today)
            for d in week_days(start)
        ]

    def completion_ratio(self, start: date, today: date | None = None) -> float:
        """Completed days in the week starting at `start`, divided by 7."""
        progress = self.week_progress(start, today)
        completed = sum(1 for day in progress if day.is_completed)
        return completed / DAYS_IN_WEEK

    def completion_percent(self, start: date) -> int:
        """Whole-number percentage for labels like "42% done" (truncated)."""
        return int(self.completion_ratio(start) * 100)


def matches_query(habit: Habit, query: str) -> bool:
    """Case-insensitive substring match on the habit name."""
    return query.lower() in habit.name.lower()


def filter_habits(habits: Iterable[Habit], query: str) -> list[Habit]:
    """Habits whose name contains `query`; a blank query keeps them all."""
    if not query.strip():
        return list(habits)
    return [h for h in habits if matches_query(h, query)]
