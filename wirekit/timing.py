"""Elapsed-time counters and delays."""

from __future__ import annotations

import time

_ULONG_MASK = 0xFFFFFFFF
_START_NS = time.monotonic_ns()


def _elapsed_ns() -> int:
    return time.monotonic_ns() - _START_NS


def millis() -> int:
    """Milliseconds since start-up, wrapping at 32 bits."""
    return (_elapsed_ns() // 1_000_000) & _ULONG_MASK


def micros() -> int:
    """Microseconds since start-up, wrapping at 32 bits."""
    return (_elapsed_ns() // 1_000) & _ULONG_MASK


def _check_duration(value: int) -> None:
    if value < 0:
        raise ValueError("a delay must not be negative")


def delay(ms: int) -> None:
    """Sleep the calling thread for at least ``ms`` milliseconds."""
    _check_duration(ms)
    deadline = time.monotonic_ns() + ms * 1_000_000
    while True:
        remaining = deadline - time.monotonic_ns()
        if remaining <= 0:
            return
        time.sleep(remaining / 1e9)


def delay_microseconds(us: int) -> None:
    """Busy-wait for at least ``us`` microseconds."""
    _check_duration(us)
    deadline = time.monotonic_ns() + us * 1_000
    while time.monotonic_ns() < deadline:
        pass


def yield_now() -> None:
    """Give other threads a chance to run."""
    time.sleep(0)