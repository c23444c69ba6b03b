"""
Frame-driven single-shot timers.

Timers only advance when the frame driver calls ``TimerQueue.update(dt)``,
so a paused or stopped loop never fires anything. Every timer can be
cancelled; a cancelled timer's callback never runs.

Usage:
    timers = TimerQueue()
    handle = timers.schedule(1.0, on_tick)
    ...
    timers.update(dt)   # once per frame
    handle.cancel()     # e.g. when returning to the title screen
"""

from dataclasses import dataclass, field
from typing import Callable, List


@dataclass
class Timer:
    """A single pending delayed callback."""

    delay: float                       # Seconds until the callback fires
    callback: Callable[[], None]
    elapsed: float = 0.0
    cancelled: bool = False
    fired: bool = False

    @property
    def remaining(self) -> float:
        """Seconds left before firing (0 when due)."""
        return max(self.delay - self.elapsed, 0.0)

    @property
    def is_pending(self) -> bool:
        """Check if the timer can still fire."""
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        """Cancel the timer. Safe to call more than once or after firing."""
        self.cancelled = True


@dataclass
class TimerQueue:
    """Owns the pending timers of one presenter."""

    _timers: List[Timer] = field(default_factory=list)

    def schedule(self, delay: float, callback: Callable[[], None]) -> Timer:
        """Schedule ``callback`` to run once after ``delay`` seconds.

        Args:
            delay: Seconds to wait (values <= 0 fire on the next update)
            callback: Zero-argument callable

        Returns:
            Timer handle that can be cancelled
        """
        timer = Timer(delay=max(delay, 0.0), callback=callback)
        self._timers.append(timer)
        return timer

    def update(self, dt: float) -> int:
        """Advance all timers and fire the ones that are due.

        Callbacks may schedule new timers; those start counting on the
        next update.

        Args:
            dt: Delta time in seconds

        Returns:
            Number of callbacks fired
        """
        due = []
        for timer in list(self._timers):
            if not timer.is_pending:
                continue
            timer.elapsed += dt
            if timer.elapsed >= timer.delay:
                due.append(timer)

        fired = 0
        for timer in due:
            # An earlier callback in this batch may have cancelled it
            if not timer.is_pending:
                continue
            timer.fired = True
            timer.callback()
            fired += 1

        self._timers = [t for t in self._timers if t.is_pending]
        return fired

    def cancel_all(self) -> None:
        """Cancel every pending timer."""
        for timer in self._timers:
            timer.cancel()
        self._timers = []

    @property
    def pending(self) -> int:
        """Number of timers still waiting to fire."""
        return sum(1 for t in self._timers if t.is_pending)
