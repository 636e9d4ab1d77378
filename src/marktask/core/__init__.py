"""Functional core - pure business logic with no I/O."""

from .dates import resolve_date, parse_absolute_date, parse_relative_date
from .annotations import Annotations, Priority, extract, parse_priority
from .tasks import Task, is_overdue, parse, parse_line
from .filters import DateRangeFilter, Filter, FilterPipeline, OverdueFilter, build_pipeline
from .render import format_task_line, render_json, render_text, task_to_dict

__all__ = [
    # Dates
    "resolve_date",
    "parse_absolute_date",
    "parse_relative_date",
    # Annotations
    "Annotations",
    "Priority",
    "extract",
    "parse_priority",
    # Tasks
    "Task",
    "parse",
    "parse_line",
    "is_overdue",
    # Filters
    "Filter",
    "OverdueFilter",
    "DateRangeFilter",
    "FilterPipeline",
    "build_pipeline",
    # Rendering
    "task_to_dict",
    "render_json",
    "format_task_line",
    "render_text",
]
