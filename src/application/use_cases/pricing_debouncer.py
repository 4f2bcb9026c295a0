"""Debouncing of pricing recalculations before they are reported upward."""

import time
from collections.abc import Callable, Mapping

DEFAULT_DEBOUNCE_MS = 300


class PricingChangeDebouncer:
    """Collapse rapid pricing snapshots into one emission of the latest.

    Each push replaces the pending snapshot and restarts the window. A
    superseded snapshot is never emitted. The debouncer runs no timer of its
    own; the caller polls it, or flushes it when the edit session ends.
    """

    def __init__(
        self,
        window_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the debouncer.

        Args:
            window_ms: Quiet period in milliseconds before a snapshot emits.
            clock: Monotonic clock returning seconds.
        """
        if window_ms < 0:
            raise ValueError("window_ms must be >= 0")
        self._window = window_ms / 1000
        self._clock = clock
        self._pending: Mapping | None = None
        self._deadline = 0.0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def push(self, snapshot: Mapping) -> None:
        """Replace the pending snapshot and restart the quiet period."""
        self._pending = snapshot
        self._deadline = self._clock() + self._window

    def poll(self) -> Mapping | None:
        """Return the pending snapshot once its quiet period has elapsed."""
        if self._pending is None or self._clock() < self._deadline:
            return None
        return self.flush()

    def flush(self) -> Mapping | None:
        """Return the pending snapshot immediately, if any."""
        snapshot, self._pending = self._pending, None
        return snapshot

    def cancel(self) -> None:
        self._pending = None


__all__ = ["DEFAULT_DEBOUNCE_MS", "PricingChangeDebouncer"]
