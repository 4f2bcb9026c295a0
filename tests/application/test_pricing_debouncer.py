"""Tests for the pricing change debouncer."""

import pytest

from src.application.use_cases.pricing_debouncer import PricingChangeDebouncer


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_poll_waits_for_quiet_period() -> None:
    """A snapshot should only emit after the window has elapsed."""
    clock = _Clock()
    debouncer = PricingChangeDebouncer(window_ms=300, clock=clock)

    debouncer.push({"v": 1})
    clock.now = 0.1
    assert debouncer.poll() is None

    clock.now = 0.4
    assert debouncer.poll() == {"v": 1}
    assert debouncer.poll() is None


def test_rapid_pushes_emit_only_latest() -> None:
    """Superseded snapshots never emit and each push restarts the window."""
    clock = _Clock()
    debouncer = PricingChangeDebouncer(window_ms=300, clock=clock)

    debouncer.push({"v": 1})
    clock.now = 0.2
    debouncer.push({"v": 2})
    clock.now = 0.35
    assert debouncer.poll() is None

    clock.now = 0.6
    assert debouncer.poll() == {"v": 2}
    assert debouncer.pending is False


def test_flush_and_cancel() -> None:
    """flush emits immediately; cancel drops the pending snapshot."""
    debouncer = PricingChangeDebouncer(clock=_Clock())

    debouncer.push({"v": 1})
    assert debouncer.flush() == {"v": 1}
    assert debouncer.flush() is None

    debouncer.push({"v": 2})
    debouncer.cancel()
    assert debouncer.flush() is None


def test_negative_window_is_rejected() -> None:
    """The quiet period cannot be negative."""
    with pytest.raises(ValueError):
        PricingChangeDebouncer(window_ms=-1)
