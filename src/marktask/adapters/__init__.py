"""Adapters - I/O implementations of ports."""

from .clock import LocalClock, FixedClock

__all__ = [
    "LocalClock",
    "FixedClock",
]
