"""Habit store port — abstract interface over the canonical habit collection.

State holders depend on this protocol, never on a specific store.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from src.core.observable import ObservableValue
from src.data.models import Habit


class HabitStorePort(Protocol):
    """Abstract habit store used by the list and create-form state holders."""

    @property
    def habits(self) -> tuple[Habit, ...]: ...

    def observe(self) -> ObservableValue[tuple[Habit, ...]]: ...

    def add(self, habit: Habit) -> None: ...

    def update(self, habit: Habit) -> None: ...

    def delete(self, habit_id: str) -> None: ...

    def toggle_completion(self, habit_id: str, day: date) -> None: ...

    def search(self, query: str) -> list[Habit]: ...
