from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum


logger = logging.getLogger(__name__)

WORK_COLOR = "#4EED83"
BREAK_COLOR = "#EDA437"


class Phase(str, Enum):
    IDLE = "idle"
    WORK = "work"
    BREAK = "break"


class TimerAction(str, Enum):
    ADVANCE = "advance"
    RESET = "reset"
    PAUSE = "pause"
    RESUME = "resume"


@dataclass(frozen=True)
class TimerEvent:
    action: TimerAction
    duration: float = 0


@dataclass(frozen=True)
class TimerState:
    phase: Phase
    is_playing: bool
    duration: float
    color: str
    restart_token: int = 0

    @property
    def duration_seconds(self) -> float:
        return self.duration * 60


def initial_state(work_minutes: float) -> TimerState:
    return TimerState(phase=Phase.IDLE, is_playing=False, duration=work_minutes, color=WORK_COLOR)


def _enter_work(state: TimerState, duration: float) -> TimerState:
    return TimerState(
        phase=Phase.WORK,
        is_playing=True,
        duration=duration,
        color=WORK_COLOR,
        restart_token=state.restart_token + 1,
    )


def _enter_break(state: TimerState, duration: float) -> TimerState:
    return TimerState(
        phase=Phase.BREAK,
        is_playing=True,
        duration=duration,
        color=BREAK_COLOR,
        restart_token=state.restart_token + 1,
    )


def _back_to_idle(state: TimerState, duration: float) -> TimerState:
    return TimerState(
        phase=Phase.IDLE,
        is_playing=False,
        duration=duration,
        color=WORK_COLOR,
        restart_token=state.restart_token + 1,
    )


# Keyed by the phase being left.
NEXT_PHASE: dict[Phase, Callable[[TimerState, float], TimerState]] = {
    Phase.IDLE: _enter_work,
    Phase.WORK: _enter_break,
    Phase.BREAK: _back_to_idle,
}


def transition(state: TimerState, event: TimerEvent) -> TimerState:
    """Pure reducer: returns the state that follows ``state`` after ``event``."""
    if event.action == TimerAction.ADVANCE:
        handler = NEXT_PHASE.get(state.phase)
        if handler is None:
            return state
        return handler(state, event.duration)
    if event.action == TimerAction.RESET:
        # Reset always takes the exit-from-break route, whatever the phase.
        return NEXT_PHASE[Phase.BREAK](state, event.duration)
    if event.action == TimerAction.PAUSE:
        if not state.is_playing:
            return state
        return replace(state, is_playing=False)
    if event.action == TimerAction.RESUME:
        if state.is_playing:
            return state
        return replace(state, is_playing=True)
    return state


class TimerMachine:
    """Holds the current TimerState and serializes every change through dispatch()."""

    def __init__(self, work_minutes: float) -> None:
        self._state = initial_state(work_minutes)
        self._listeners: list[Callable[[TimerState], None]] = []

    @property
    def state(self) -> TimerState:
        return self._state

    def subscribe(self, listener: Callable[[TimerState], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, event: TimerEvent) -> TimerState:
        previous = self._state
        self._state = transition(previous, event)
        logger.debug(
            "%s: %s -> %s (playing=%s, duration=%s, token=%s)",
            event.action.value,
            previous.phase.value,
            self._state.phase.value,
            self._state.is_playing,
            self._state.duration,
            self._state.restart_token,
        )
        for listener in list(self._listeners):
            listener(self._state)
        return self._state
