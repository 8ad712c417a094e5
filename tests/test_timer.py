from dataclasses import replace

import pytest

from pomotimer.core.timer import (
    BREAK_COLOR,
    NEXT_PHASE,
    WORK_COLOR,
    Phase,
    TimerAction,
    TimerEvent,
    TimerMachine,
    TimerState,
    initial_state,
    transition,
)


ALL_STATES = [
    initial_state(25),
    TimerState(phase=Phase.WORK, is_playing=True, duration=25, color=WORK_COLOR, restart_token=1),
    TimerState(phase=Phase.WORK, is_playing=False, duration=25, color=WORK_COLOR, restart_token=1),
    TimerState(phase=Phase.BREAK, is_playing=True, duration=5, color=BREAK_COLOR, restart_token=2),
    TimerState(phase=Phase.BREAK, is_playing=False, duration=5, color=BREAK_COLOR, restart_token=2),
]


def test_initial_state_is_idle_and_stopped() -> None:
    state = initial_state(20)

    assert state.phase == Phase.IDLE
    assert state.is_playing is False
    assert state.duration == 20
    assert state.color == WORK_COLOR
    assert state.duration_seconds == 1200


def test_every_phase_has_an_advance_handler() -> None:
    assert set(NEXT_PHASE) == set(Phase)


def test_advance_from_idle_starts_work() -> None:
    state = transition(initial_state(20), TimerEvent(TimerAction.ADVANCE, 25))

    assert state.phase == Phase.WORK
    assert state.is_playing is True
    assert state.duration == 25
    assert state.color == WORK_COLOR


def test_advance_from_work_starts_break() -> None:
    work = transition(initial_state(25), TimerEvent(TimerAction.ADVANCE, 25))
    state = transition(work, TimerEvent(TimerAction.ADVANCE, 5))

    assert state.phase == Phase.BREAK
    assert state.is_playing is True
    assert state.duration == 5
    assert state.color == BREAK_COLOR


def test_advance_from_break_returns_to_idle() -> None:
    state = transition(ALL_STATES[3], TimerEvent(TimerAction.ADVANCE, 25))

    assert state.phase == Phase.IDLE
    assert state.is_playing is False
    assert state.duration == 25
    assert state.color == WORK_COLOR


def test_full_cycle_keeps_last_duration() -> None:
    state = initial_state(20)
    for minutes in [25, 5, 25]:
        state = transition(state, TimerEvent(TimerAction.ADVANCE, minutes))

    assert state.phase == Phase.IDLE
    assert state.duration == 25
    assert state.restart_token == 3


def test_advance_without_duration_uses_zero() -> None:
    state = transition(initial_state(25), TimerEvent(TimerAction.ADVANCE))

    assert state.duration == 0


@pytest.mark.parametrize("start", ALL_STATES)
def test_reset_always_lands_on_idle(start: TimerState) -> None:
    once = transition(start, TimerEvent(TimerAction.RESET, 30))
    twice = transition(once, TimerEvent(TimerAction.RESET, 30))

    for state in (once, twice):
        assert state.phase == Phase.IDLE
        assert state.is_playing is False
        assert state.duration == 30
        assert state.color == WORK_COLOR
    assert replace(once, restart_token=0) == replace(twice, restart_token=0)
    assert once.restart_token != twice.restart_token


@pytest.mark.parametrize("start", ALL_STATES)
def test_pause_then_resume_only_touches_is_playing(start: TimerState) -> None:
    paused = transition(start, TimerEvent(TimerAction.PAUSE))
    resumed = transition(paused, TimerEvent(TimerAction.RESUME))

    assert paused.is_playing is False
    assert resumed.is_playing is True
    assert replace(resumed, is_playing=start.is_playing) == start


@pytest.mark.parametrize("start", ALL_STATES)
def test_restart_token_changes_only_on_phase_entry(start: TimerState) -> None:
    advanced = transition(start, TimerEvent(TimerAction.ADVANCE, 10))
    reset = transition(start, TimerEvent(TimerAction.RESET, 10))
    paused = transition(start, TimerEvent(TimerAction.PAUSE))
    resumed = transition(start, TimerEvent(TimerAction.RESUME))

    assert advanced.restart_token != start.restart_token
    assert reset.restart_token != start.restart_token
    assert paused.restart_token == start.restart_token
    assert resumed.restart_token == start.restart_token


def test_pause_on_paused_state_is_unchanged() -> None:
    paused = ALL_STATES[2]

    assert transition(paused, TimerEvent(TimerAction.PAUSE)) == paused


def test_pause_ignores_event_duration() -> None:
    playing = ALL_STATES[1]

    paused = transition(playing, TimerEvent(TimerAction.PAUSE, 99))

    assert paused.duration == playing.duration


def test_unknown_phase_handler_is_a_no_op(monkeypatch) -> None:
    monkeypatch.delitem(NEXT_PHASE, Phase.WORK)
    work = ALL_STATES[1]

    assert transition(work, TimerEvent(TimerAction.ADVANCE, 5)) is work


def test_negative_duration_is_passed_through() -> None:
    state = transition(initial_state(25), TimerEvent(TimerAction.ADVANCE, -3))

    assert state.duration == -3


def test_machine_dispatch_replaces_state_and_notifies() -> None:
    machine = TimerMachine(25)
    seen: list[TimerState] = []
    machine.subscribe(seen.append)

    first = machine.state
    result = machine.dispatch(TimerEvent(TimerAction.ADVANCE, 25))

    assert result is machine.state
    assert machine.state.phase == Phase.WORK
    assert first.phase == Phase.IDLE
    assert seen == [machine.state]
