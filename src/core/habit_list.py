"""
Habit Tracker — Habit List State.

Combines the store's habit stream with the list screen's transient inputs
(search text, displayed week, delete confirmation) into one immutable
HabitListState snapshot. Any input change triggers a full recompute.

This module depends on HabitStorePort, not on a specific store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import TYPE_CHECKING, Callable

from src.core import dates
from src.core.observable import ObservableValue
from src.data.models import Habit, filter_habits

if TYPE_CHECKING:
    from src.ports.habit_store_port import HabitStorePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HabitListState:
    """Snapshot handed to the list screen for rendering."""

    habits: tuple[Habit, ...] = ()
    search_query: str = ""
    current_week_start: date = field(default_factory=lambda: dates.week_start(dates.today()))
    show_delete_dialog: bool = False
    habit_to_delete: Habit | None = None

    @property
    def current_week_end(self) -> date:
        return self.current_week_start + timedelta(days=dates.DAYS_IN_WEEK - 1)

    @property
    def week_label(self) -> str:
        return dates.week_range_label(self.current_week_start)

    @property
    def is_empty(self) -> bool:
        return not self.habits

    @property
    def is_search_miss(self) -> bool:
        """Nothing shown because a non-blank query matched no habit."""
        return self.is_empty and bool(self.search_query.strip())

    @property
    def delete_prompt(self) -> Habit | None:
        """Habit to name in the confirmation dialog, if the dialog is up."""
        if self.show_delete_dialog:
            return self.habit_to_delete
        return None


def build_list_state(
    habits: tuple[Habit, ...],
    query: str,
    week_start: date,
    show_dialog: bool,
    habit_to_delete: Habit | None,
) -> HabitListState:
    """Pure recompute of the list snapshot from the latest inputs."""
    return HabitListState(
        habits=tuple(filter_habits(habits, query)),
        search_query=query,
        current_week_start=week_start,
        show_delete_dialog=show_dialog,
        habit_to_delete=habit_to_delete,
    )


class HabitListStateHolder:
    """State holder behind the habit list screen.

    Args:
        store: Canonical habit collection.
        clock: Returns "today"; defaults to dates.today (configured TIMEZONE).
    """

    def __init__(
        self,
        store: HabitStorePort,
        clock: Callable[[], date] = dates.today,
    ) -> None:
        self._store = store
        self._clock = clock

        self._search_query: ObservableValue[str] = ObservableValue("")
        self._current_week_start: ObservableValue[date] = ObservableValue(
            dates.week_start(clock())
        )
        self._show_delete_dialog: ObservableValue[bool] = ObservableValue(False)
        self._habit_to_delete: ObservableValue[Habit | None] = ObservableValue(None)

        self._state: ObservableValue[HabitListState] = ObservableValue(self._compute())

        self._unsubscribers = [
            store.observe().subscribe(self._recompute),
            self._search_query.subscribe(self._recompute),
            self._current_week_start.subscribe(self._recompute),
            self._show_delete_dialog.subscribe(self._recompute),
            self._habit_to_delete.subscribe(self._recompute),
        ]

    # -------------------- combine --------------------

    def _compute(self) -> HabitListState:
        return build_list_state(
            self._store.habits,
            self._search_query.value,
            self._current_week_start.value,
            self._show_delete_dialog.value,
            self._habit_to_delete.value,
        )

    def _recompute(self, _changed: object = None) -> None:
        self._state.set(self._compute())

    # -------------------- outputs --------------------

    @property
    def state(self) -> HabitListState:
        return self._state.value

    def observe(self) -> ObservableValue[HabitListState]:
        return self._state

    def close(self) -> None:
        """Detach from the store and inputs; the last snapshot stays readable."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # -------------------- intents --------------------

    def set_search_query(self, text: str) -> None:
        self._search_query.set(text)

    def clear_search(self) -> None:
        self._search_query.set("")

    def toggle_completion(self, habit_id: str, day: date) -> None:
        """Toggle `day` for a habit, but only when `day` is today.

        Past and future dates are read-only through this path.
        """
        if day != self._clock():
            logger.debug("Toggle ignored for %s: %s is not today", habit_id, day.isoformat())
            return
        self._store.toggle_completion(habit_id, day)

    def request_delete(self, habit: Habit) -> None:
        self._habit_to_delete.set(habit)
        self._show_delete_dialog.set(True)

    def cancel_delete(self) -> None:
        self._show_delete_dialog.set(False)
        self._habit_to_delete.set(None)

    def confirm_delete(self, habit_id: str) -> None:
        """Delete the habit, then always close the dialog."""
        self._store.delete(habit_id)
        self.cancel_delete()

    def navigate_week(self, forward: bool) -> None:
        self._current_week_start.update(lambda anchor: dates.shift_week(anchor, forward))

    def go_to_current_week(self) -> None:
        self._current_week_start.set(dates.week_start(self._clock()))
