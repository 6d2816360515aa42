"""A countdown timer driven by explicit time deltas."""

from __future__ import annotations

from enum import Enum


class TimerMode(Enum):
    """Whether a timer stops after finishing or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """Counts elapsed seconds up to a duration."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        if duration < 0:
            raise ValueError("timer duration must not be negative")
        self.duration = float(duration)
        self.mode = mode
        self.elapsed = 0.0
        self._finished = False
        self._times_finished = 0

    def __repr__(self) -> str:
        return (
            f"Timer(duration={self.duration!r}, mode={self.mode}, "
            f"elapsed={self.elapsed!r})"
        )

    @property
    def times_finished_this_tick(self) -> int:
        """How many times the timer completed during the last tick."""
        return self._times_finished

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("cannot tick a timer by a negative delta")
        if self._finished:
            self._times_finished = 0
            if self.mode is TimerMode.ONCE:
                return self
            self._finished = False

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration == 0.0:
                self._times_finished = 1
                self.elapsed = 0.0
            else:
                self._times_finished = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
        else:
            self._times_finished = 1
            self.elapsed = self.duration
        return self

    def reset(self) -> None:
        """Return to zero elapsed time, not finished."""
        self.elapsed = 0.0
        self._finished = False
        self._times_finished = 0

    def is_finished(self) -> bool:
        """Whether the timer has reached its duration."""
        return self._finished

    def just_finished(self) -> bool:
        """Whether the last tick completed the timer."""
        return self._times_finished > 0

    def fraction(self) -> float:
        """Elapsed share of the duration, from 0 to 1."""
        if self.duration == 0.0:
            return 1.0
        return self.elapsed / self.duration

    def remaining(self) -> float:
        """Seconds left until the timer finishes."""
        return self.duration - self.elapsed