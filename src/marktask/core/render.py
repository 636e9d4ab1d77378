"""Task output formatting - no I/O dependencies."""

import json
from typing import Any

from .tasks import Task


def task_to_dict(task: Task) -> dict[str, Any]:
    """Serializable view of a task. Absent dates are omitted."""
    data: dict[str, Any] = {
        "name": task.name,
        "completed": task.completed,
    }
    for key in ("due", "scheduled", "start"):
        value = getattr(task, key)
        if value is not None:
            data[key] = value.isoformat()
    data["overdue"] = task.overdue
    data["priority"] = task.priority.value
    return data


def render_json(tasks: list[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def format_task_line(task: Task) -> str:
    """Format a task as '[x] - name'."""
    checkbox = "[x]" if task.completed else "[ ]"
    return f"{checkbox} - {task.name}"


def render_text(tasks: list[Task]) -> str:
    return "\n".join(format_task_line(t) for t in tasks)
