"""Composable task filters - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from .tasks import Task


class Filter(Protocol):
    """Narrows a list of tasks to an order-preserving subsequence."""

    def apply(self, tasks: list[Task]) -> list[Task]:
        ...


@dataclass(frozen=True)
class OverdueFilter:
    """Drop overdue tasks unless show_overdue is set."""

    show_overdue: bool = True

    def apply(self, tasks: list[Task]) -> list[Task]:
        if self.show_overdue:
            return list(tasks)
        return [t for t in tasks if not t.overdue]


@dataclass(frozen=True)
class DateRangeFilter:
    """
    Keep tasks whose due date falls within [date_from, date_to].

    Both bounds are inclusive and optional. With no bounds every task
    passes; with any bound, tasks without a due date are dropped.
    """

    date_from: date | None = None
    date_to: date | None = None

    def includes(self, task: Task) -> bool:
        if self.date_from is None and self.date_to is None:
            return True
        if task.due is None:
            return False
        if self.date_from is not None and task.due < self.date_from:
            return False
        if self.date_to is not None and task.due > self.date_to:
            return False
        return True

    def apply(self, tasks: list[Task]) -> list[Task]:
        return [t for t in tasks if self.includes(t)]


@dataclass
class FilterPipeline:
    """Ordered chain of filters, applied left to right."""

    filters: list[Filter] = field(default_factory=list)

    def add(self, task_filter: Filter) -> "FilterPipeline":
        self.filters.append(task_filter)
        return self

    def apply(self, tasks: list[Task]) -> list[Task]:
        result = list(tasks)
        for task_filter in self.filters:
            result = task_filter.apply(result)
        return result

    def __len__(self) -> int:
        return len(self.filters)


def build_pipeline(
    show_overdue: bool = True,
    date_from: date | None = None,
    date_to: date | None = None,
) -> FilterPipeline:
    """Pipeline for the standard listing: overdue filter, then date range."""
    return (
        FilterPipeline()
        .add(OverdueFilter(show_overdue=show_overdue))
        .add(DateRangeFilter(date_from=date_from, date_to=date_to))
    )
