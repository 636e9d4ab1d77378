"""Clock adapters."""

from datetime import date


class LocalClock:
    """
    System clock.

    Implements Clock protocol. Reads the process's local date on every call.
    """

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a single date, for tests and reproducible runs."""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed

    def __repr__(self) -> str:
        return f"FixedClock({self.fixed.isoformat()})"
