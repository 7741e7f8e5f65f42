"""Shared test fixtures and configuration.

Sets up environment variables before any src imports so src.config loads
predictable settings, and provides common fixtures like a fixed "today".
"""

import os

# Patch env vars BEFORE any src imports
os.environ.setdefault("TIMEZONE", "")
os.environ.setdefault("EMPTY_NAME_ERROR", "Name cannot be empty")
os.environ.setdefault("WEEK_LABEL_FORMAT", "%d %b")

import pytest
from datetime import date


@pytest.fixture
def today():
    """A fixed Wednesday used as the current date."""
    return date(2026, 2, 4)


@pytest.fixture
def store():
    """Return an empty HabitStore."""
    from src.data.habit_store import HabitStore
    return HabitStore()


@pytest.fixture
def seeded_store():
    """Return a HabitStore holding three habits in a known order."""
    from src.data.habit_store import HabitStore
    from src.data.models import Habit
    return HabitStore([
        Habit(name="Morning run", id="run"),
        Habit(name="Walking", id="walk"),
        Habit(name="Read a book", id="read"),
    ])


@pytest.fixture
def list_holder(seeded_store, today):
    """Return a HabitListStateHolder over seeded_store with a fixed clock."""
    from src.core.habit_list import HabitListStateHolder
    holder = HabitListStateHolder(seeded_store, clock=lambda: today)
    yield holder
    holder.close()
