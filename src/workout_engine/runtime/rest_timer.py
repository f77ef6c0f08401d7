"""Rest countdown owned by a single workout session."""

from __future__ import annotations


class RestTimer:
    """A cancellable countdown advanced by explicit ticks.

    The host calls :meth:`tick` once per elapsed second; the timer never
    schedules anything itself. ``remaining`` is None when no countdown runs.
    """

    def __init__(self) -> None:
        self.remaining: int | None = None

    @property
    def is_running(self) -> bool:
        return self.remaining is not None

    def start(self, seconds: int) -> None:
        """Start (or restart) the countdown. Non-positive values clear it."""
        self.remaining = seconds if seconds > 0 else None

    def tick(self, seconds: int = 1) -> int | None:
        """Advance the countdown; reaching zero clears it."""
        if self.remaining is None:
            return None
        self.remaining -= seconds
        if self.remaining <= 0:
            self.remaining = None
        return self.remaining

    def extend(self, seconds: int) -> None:
        """Add time to a running countdown. No-op when stopped."""
        if self.remaining is not None:
            self.remaining += seconds

    def cancel(self) -> None:
        self.remaining = None
