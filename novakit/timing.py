"""Countdown timers, stopwatches and whole-number time scales."""

from __future__ import annotations

from typing import TypeVar

S = TypeVar("S", bound="TimeScale")


class Timer:
    """Counts down from ``duration`` as frame times are fed to it."""

    def __init__(self, duration: float) -> None:
        self.duration = duration
        self._remaining = duration
        self._paused = False

    @property
    def paused(self) -> bool:
        return self._paused

    def update(self, delta: float) -> None:
        """Advance the timer by ``delta`` seconds unless paused or finished."""
        if self._paused:
            return
        if self._remaining > 0.0:
            self._remaining -= delta

    def elapsed(self) -> float:
        """Seconds counted down since the last reset."""
        return self.duration - self._remaining

    def reset(self) -> None:
        self._remaining = self.duration

    def done(self) -> bool:
        return self._remaining <= 0.0

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        self._paused = False


class TimeScale:
    """A time span, given in seconds, held as a whole number of units."""

    def __init__(self, seconds: float = 0.0) -> None:
        self.value = int(self._scale(seconds))

    @staticmethod
    def _scale(seconds: float) -> float:
        return seconds

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value})"


class Seconds(TimeScale):
    """Whole seconds."""


class Milliseconds(TimeScale):
    """Whole milliseconds."""

    @staticmethod
    def _scale(seconds: float) -> float:
        return seconds * 1000


class Minutes(TimeScale):
    """Whole minutes."""

    @staticmethod
    def _scale(seconds: float) -> float:
        return seconds / 60


class Stopwatch:
    """Accumulates frame times while running."""

    def __init__(self) -> None:
        self._elapsed = 0.0
        self._paused = False

    @property
    def seconds(self) -> float:
        """The accumulated time in seconds."""
        return self._elapsed

    @property
    def paused(self) -> bool:
        return self._paused

    def tick(self, delta: float) -> None:
        """Add ``delta`` seconds unless paused."""
        if self._paused:
            return
        self._elapsed += delta

    def get(self, scale: type[S]) -> S:
        """Return the accumulated time expressed in ``scale``."""
        return scale(self._elapsed)

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        self._paused = False