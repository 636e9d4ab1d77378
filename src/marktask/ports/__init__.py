"""Ports - interfaces/protocols for external dependencies."""

from .clock import Clock

__all__ = [
    "Clock",
]
