"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date

from marktask.ports.clock import Clock

from .annotations import Priority, extract

TASK_LINE_RE = re.compile(r"^\s*-\s*\[( |x)\]\s*(.*)")


@dataclass(frozen=True)
class Task:
    """A checklist item parsed from one line of text."""

    name: str
    completed: bool
    due: date | None = None
    scheduled: date | None = None
    start: date | None = None
    overdue: bool = False
    priority: Priority = Priority.NONE


def is_overdue(due: date | None, as_of: date) -> bool:
    """Due strictly before as_of. Tasks due on as_of are not overdue."""
    return due is not None and due < as_of


def parse_line(line: str, today: date) -> Task | None:
    """Parse a single line. Returns None if it is not a checklist item."""
    match = TASK_LINE_RE.match(line)
    if not match:
        return None

    marker, tail = match.groups()
    found = extract(tail)
    return Task(
        name=found.name,
        completed=marker == "x",
        due=found.due,
        scheduled=found.scheduled,
        start=found.start,
        overdue=is_overdue(found.due, today),
        priority=found.priority,
    )


def parse(text: str, clock: Clock | None = None) -> list[Task]:
    """
    Parse checklist text into tasks, one per matching line.

    Lines that are not "- [ ]" / "- [x]" items are skipped. Today's date is
    read once from the clock so every task in a run is judged against the
    same day.
    """
    today = clock.today() if clock else date.today()
    tasks = []
    # Split on "\n" only; other line-break characters stay inside a task line
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        task = parse_line(line, today)
        if task is not None:
            tasks.append(task)
    return tasks
