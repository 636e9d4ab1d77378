"""Clock interface."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Interface for reading the current local calendar date."""

    def today(self) -> date:
        """Return today's date."""
        ...
