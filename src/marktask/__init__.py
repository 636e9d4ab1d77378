"""marktask - parse and filter checklist tasks from Markdown text."""

from .adapters import FixedClock, LocalClock
from .core import (
    DateRangeFilter,
    Filter,
    FilterPipeline,
    OverdueFilter,
    Priority,
    Task,
    build_pipeline,
    extract,
    parse,
    parse_priority,
    resolve_date,
)
from .ports import Clock

__all__ = [
    "parse",
    "resolve_date",
    "parse_priority",
    "extract",
    "Task",
    "Priority",
    "Filter",
    "OverdueFilter",
    "DateRangeFilter",
    "FilterPipeline",
    "build_pipeline",
    "Clock",
    "LocalClock",
    "FixedClock",
]
