"""
Habit Tracker — Habit Store.

Owns the canonical, insertion-ordered collection of habits for the life of
the process. Every mutation builds a new tuple and republishes it; unknown
ids are silently ignored rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from src.core.observable import ObservableValue
from src.data.models import Habit, filter_habits

logger = logging.getLogger(__name__)


class HabitStore:
    """In-memory store for habits, observable by state holders."""

    def __init__(self, habits: list[Habit] | None = None) -> None:
        self._habits: ObservableValue[tuple[Habit, ...]] = ObservableValue(tuple(habits or ()))

    @property
    def habits(self) -> tuple[Habit, ...]:
        return self._habits.value

    def observe(self) -> ObservableValue[tuple[Habit, ...]]:
        return self._habits

    def get(self, habit_id: str) -> Habit | None:
        """Fetch a single habit by ID."""
        for habit in self._habits.value:
            if habit.id == habit_id:
                return habit
        return None

    def add(self, habit: Habit) -> None:
        """Append a habit. Names are not deduplicated."""
        self._habits.set(self._habits.value + (habit,))
        logger.info("Habit added: %s '%s'", habit.id, habit.name)

    def update(self, habit: Habit) -> None:
        """Replace the habit with the same id; unknown id is a no-op."""
        current = self._habits.value
        if not any(h.id == habit.id for h in current):
            logger.debug("Update ignored: no habit %s", habit.id)
            return
        self._habits.set(tuple(habit if h.id == habit.id else h for h in current))

    def delete(self, habit_id: str) -> None:
        """Remove every habit with `habit_id`; unknown id is a no-op."""
        current = self._habits.value
        remaining = tuple(h for h in current if h.id != habit_id)
        if len(remaining) == len(current):
            logger.debug("Delete ignored: no habit %s", habit_id)
            return
        self._habits.set(remaining)
        logger.info("Habit deleted: %s", habit_id)

    def toggle_completion(self, habit_id: str, day: date) -> None:
        """Flip the completion flag for `day`, writing the new value explicitly."""
        current = self._habits.value
        if not any(h.id == habit_id for h in current):
            logger.debug("Toggle ignored: no habit %s", habit_id)
            return

        def _toggled(habit: Habit) -> Habit:
            history = dict(habit.completion_history)
            history[day] = not habit.is_completed_on(day)
            return replace(habit, completion_history=history)

        self._habits.set(tuple(_toggled(h) if h.id == habit_id else h for h in current))
        logger.debug("Habit %s toggled on %s", habit_id, day.isoformat())

    def search(self, query: str) -> list[Habit]:
        """Habits whose name contains `query` (case-insensitive), in store order."""
        return filter_habits(self._habits.value, query)
