"""Inline annotation extraction - dates and priority signifiers."""

import logging
import re
from datetime import date
from enum import Enum
from typing import NamedTuple

from .dates import parse_absolute_date

logger = logging.getLogger(__name__)


class Priority(Enum):
    """Task priority, highest first."""

    HIGHEST = "Highest"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    LOWEST = "Lowest"
    NONE = "None"

    @property
    def symbol(self) -> str | None:
        """Signifier emoji for this priority."""
        return PRIORITY_SYMBOLS.get(self)

    @property
    def rank(self) -> int:
        """Numeric rank for ordering: Highest=5 ... None=0."""
        return PRIORITY_RANKS[self]

    def __lt__(self, other: "Priority") -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank


# Precedence order: first symbol present wins.
PRIORITY_SYMBOLS = {
    Priority.HIGHEST: "🔺",
    Priority.HIGH: "⏫",
    Priority.MEDIUM: "🔼",
    Priority.LOW: "🔽",
    Priority.LOWEST: "⏬",
}

PRIORITY_RANKS = {
    Priority.HIGHEST: 5,
    Priority.HIGH: 4,
    Priority.MEDIUM: 3,
    Priority.LOW: 2,
    Priority.LOWEST: 1,
    Priority.NONE: 0,
}

DUE_RE = re.compile(r"📅 (\d{4}-\d{2}-\d{2})")
SCHEDULED_RE = re.compile(r"⏳ (\d{4}-\d{2}-\d{2})")
START_RE = re.compile(r"🛫 (\d{4}-\d{2}-\d{2})")

WHITESPACE_RE = re.compile(r"\s+")


class Annotations(NamedTuple):
    """Values pulled out of a task line's free text."""

    due: date | None
    scheduled: date | None
    start: date | None
    priority: Priority
    name: str


def _find_date(pattern: re.Pattern, text: str) -> date | None:
    match = pattern.search(text)
    if not match:
        return None
    parsed = parse_absolute_date(match.group(1))
    if parsed is None:
        logger.debug(f"Dropping invalid annotation {match.group(0)!r}")
    return parsed


def parse_priority(text: str) -> tuple[str, Priority]:
    """
    Find the priority signifier in text.

    Symbols are checked in precedence order and the first one present
    decides. Only that symbol is removed; any other signifiers stay in the
    returned text.
    """
    for priority, symbol in PRIORITY_SYMBOLS.items():
        if symbol in text:
            return text.replace(symbol, ""), priority
    return text, Priority.NONE


def extract(tail: str) -> Annotations:
    """
    Extract dates and priority from the text after a checkbox.

    Date annotations are stripped first (all of them, even ones whose date
    does not parse), then the priority signifier, then whitespace is
    collapsed.
    """
    due = _find_date(DUE_RE, tail)
    scheduled = _find_date(SCHEDULED_RE, tail)
    start = _find_date(START_RE, tail)

    text = tail
    for pattern in (DUE_RE, SCHEDULED_RE, START_RE):
        text = pattern.sub("", text)

    text, priority = parse_priority(text)
    name = WHITESPACE_RE.sub(" ", text).strip()

    return Annotations(
        due=due,
        scheduled=scheduled,
        start=start,
        priority=priority,
        name=name,
    )
