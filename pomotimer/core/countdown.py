from __future__ import annotations

import time
from collections.abc import Callable, Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class CountdownSnapshot:
    total_seconds: int
    remaining_seconds: int
    elapsed_seconds: int
    progress: float
    is_playing: bool
    is_completed: bool
    restart_key: Hashable | None


class Countdown:
    """Monotonic countdown detached from the UI framework.

    A run is identified by its restart key: syncing with a new key drops any
    progress and starts again from the full duration. Reaching zero while
    playing stops the run and calls ``on_complete`` once.
    """

    def __init__(self, on_complete: Callable[[], None] | None = None) -> None:
        self._on_complete = on_complete
        self._restart_key: Hashable | None = None
        self._total_sec = 0.0
        self._elapsed_before_pause_sec = 0.0
        self._started_monotonic: float | None = None
        self._completed = False

    @property
    def is_playing(self) -> bool:
        return self._started_monotonic is not None

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def restart_key(self) -> Hashable | None:
        return self._restart_key

    def sync(
        self,
        is_playing: bool,
        duration_seconds: float,
        restart_key: Hashable,
        now: float | None = None,
    ) -> None:
        if now is None:
            now = time.monotonic()
        if restart_key != self._restart_key:
            self._restart(duration_seconds, restart_key)
        if is_playing:
            self.resume(now)
        else:
            self.pause(now)

    def pause(self, now: float | None = None) -> None:
        if self._started_monotonic is None:
            return
        if now is None:
            now = time.monotonic()
        self._elapsed_before_pause_sec = self._current_elapsed(now)
        self._started_monotonic = None

    def resume(self, now: float | None = None) -> None:
        if self._started_monotonic is not None or self._completed:
            return
        if now is None:
            now = time.monotonic()
        self._started_monotonic = now

    def tick(self, now: float | None = None) -> CountdownSnapshot:
        if now is None:
            now = time.monotonic()
        if self._started_monotonic is not None and self._current_elapsed(now) >= self._total_sec:
            self._elapsed_before_pause_sec = self._total_sec
            self._started_monotonic = None
            self._completed = True
            if self._on_complete is not None:
                self._on_complete()
        return self.snapshot(now)

    def snapshot(self, now: float | None = None) -> CountdownSnapshot:
        if now is None:
            now = time.monotonic()
        elapsed = self._current_elapsed(now)
        total = max(0, int(round(self._total_sec)))
        elapsed_seconds = min(total, max(0, int(elapsed)))
        remaining_seconds = max(0, total - elapsed_seconds)
        progress = (elapsed / self._total_sec) if self._total_sec > 0 else 0.0
        return CountdownSnapshot(
            total_seconds=total,
            remaining_seconds=remaining_seconds,
            elapsed_seconds=elapsed_seconds,
            progress=max(0.0, min(1.0, progress)),
            is_playing=self.is_playing,
            is_completed=self._completed,
            restart_key=self._restart_key,
        )

    def _restart(self, duration_seconds: float, restart_key: Hashable) -> None:
        self._restart_key = restart_key
        self._total_sec = float(duration_seconds)
        self._elapsed_before_pause_sec = 0.0
        self._started_monotonic = None
        self._completed = False

    def _current_elapsed(self, now: float) -> float:
        elapsed = self._elapsed_before_pause_sec
        if self._started_monotonic is not None:
            elapsed += max(0.0, now - self._started_monotonic)
        return min(max(self._total_sec, 0.0), elapsed)
