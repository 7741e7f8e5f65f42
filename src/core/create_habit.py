"""
Habit Tracker — Create Habit Form.

Holds the single name field of the create screen plus its validation
feedback. Saving delegates to the habit store; validation failures are
reported through the form state, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from src.config import settings
from src.core.observable import ObservableValue
from src.data.models import Habit

if TYPE_CHECKING:
    from src.ports.habit_store_port import HabitStorePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateHabitState:
    """Create form snapshot."""

    habit_name: str = ""
    is_name_error: bool = False
    error_message: str = ""


class CreateHabitFormHolder:
    """State holder behind the create habit screen."""

    def __init__(self, store: HabitStorePort) -> None:
        self._store = store
        self._state: ObservableValue[CreateHabitState] = ObservableValue(CreateHabitState())

    @property
    def state(self) -> CreateHabitState:
        return self._state.value

    def observe(self) -> ObservableValue[CreateHabitState]:
        return self._state

    def set_name(self, text: str) -> None:
        """Update the name; typing always clears earlier error feedback."""
        self._state.set(
            replace(self._state.value, habit_name=text, is_name_error=False, error_message="")
        )

    def submit(self) -> bool:
        """Validate and save the habit.

        Returns:
            True if a habit was added to the store, False on a blank name.
            The form state is left as is on success; the caller decides
            whether to reset or navigate away.
        """
        name = self._state.value.habit_name.strip()
        if not name:
            self._state.set(
                replace(
                    self._state.value,
                    is_name_error=True,
                    error_message=settings.EMPTY_NAME_ERROR,
                )
            )
            logger.debug("Create rejected: blank habit name")
            return False

        self._store.add(Habit(name=name))
        return True

    def reset(self) -> None:
        self._state.set(CreateHabitState())
