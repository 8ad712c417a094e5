from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from pomotimer.config import DEFAULT_BREAK_MINUTES, DEFAULT_WORK_MINUTES
from pomotimer.core.timer import Phase, TimerAction, TimerEvent, TimerMachine, TimerState
from pomotimer.data.storage import Storage


logger = logging.getLogger(__name__)

WORK_MINUTES_KEY = "work_minutes"
BREAK_MINUTES_KEY = "break_minutes"


class AppState(QObject):
    """Presentation-side model: configured minutes plus the timer they feed.

    The configured minutes are read only when an event is dispatched, so
    editing them never touches the phase already running.
    """

    state_changed = pyqtSignal(object)
    durations_changed = pyqtSignal(object, object)

    def __init__(
        self,
        work_minutes: float = DEFAULT_WORK_MINUTES,
        break_minutes: float = DEFAULT_BREAK_MINUTES,
    ) -> None:
        super().__init__()
        self.work_minutes: float = work_minutes
        self.break_minutes: float = break_minutes
        self._storage: Storage | None = None
        self.machine = TimerMachine(work_minutes)
        self.machine.subscribe(self.state_changed.emit)

    @property
    def timer_state(self) -> TimerState:
        return self.machine.state

    def load_from_storage(self, storage: Storage) -> None:
        self._storage = storage
        self.work_minutes = self._number_setting(storage, WORK_MINUTES_KEY, self.work_minutes)
        self.break_minutes = self._number_setting(storage, BREAK_MINUTES_KEY, self.break_minutes)
        self.durations_changed.emit(self.work_minutes, self.break_minutes)
        if self.timer_state.phase == Phase.IDLE and self.timer_state.duration != self.work_minutes:
            # Idle timer: show the restored work length instead of the default.
            self.dispatch(TimerEvent(TimerAction.RESET, self.work_minutes))

    def set_work_minutes(self, value: float) -> None:
        self.work_minutes = value
        self._save_setting(WORK_MINUTES_KEY, value)
        self.durations_changed.emit(self.work_minutes, self.break_minutes)

    def set_break_minutes(self, value: float) -> None:
        self.break_minutes = value
        self._save_setting(BREAK_MINUTES_KEY, value)
        self.durations_changed.emit(self.work_minutes, self.break_minutes)

    def dispatch(self, event: TimerEvent) -> TimerState:
        return self.machine.dispatch(event)

    def minutes_for_next_phase(self) -> float:
        if self.timer_state.phase == Phase.WORK:
            return self.break_minutes
        return self.work_minutes

    def primary_action(self) -> TimerState:
        """Start from idle; anywhere else, reset back to idle."""
        if self.timer_state.phase == Phase.IDLE:
            logger.info("start: work for %s min", self.work_minutes)
            return self.dispatch(TimerEvent(TimerAction.ADVANCE, self.work_minutes))
        logger.info("reset from %s", self.timer_state.phase.value)
        return self.dispatch(TimerEvent(TimerAction.RESET, self.work_minutes))

    def secondary_action(self) -> TimerState:
        if self.timer_state.phase == Phase.IDLE:
            return self.timer_state
        if self.timer_state.is_playing:
            return self.dispatch(TimerEvent(TimerAction.PAUSE))
        return self.dispatch(TimerEvent(TimerAction.RESUME))

    def complete_phase(self) -> TimerState:
        logger.info("%s finished", self.timer_state.phase.value)
        return self.dispatch(TimerEvent(TimerAction.ADVANCE, self.minutes_for_next_phase()))

    def _save_setting(self, key: str, value: Any) -> None:
        logger.info("setting %s = %r", key, value)
        if self._storage:
            self._storage.set_setting(key, value)

    @staticmethod
    def _number_setting(storage: Storage, key: str, default: float) -> float:
        value = storage.get_setting(key, default)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning("ignoring stored %s=%r", key, value)
            return default
        return value
