"""Tests for the task filter pipeline."""

from datetime import date, timedelta

import pytest

from marktask.adapters.clock import FixedClock
from marktask.core.dates import resolve_date
from marktask.core.filters import (
    DateRangeFilter,
    FilterPipeline,
    OverdueFilter,
    build_pipeline,
)
from marktask.core.tasks import Task


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def overdue_tasks(today):
    return [
        Task(name="Task due today", completed=False, due=today),
        Task(name="Overdue task", completed=False, due=today - timedelta(days=1), overdue=True),
        Task(name="No due date task", completed=False),
        Task(name="Also overdue", completed=True, due=today - timedelta(days=9), overdue=True),
    ]


@pytest.fixture
def base_date():
    return date(2024, 1, 1)


@pytest.fixture
def dated_tasks(base_date):
    return [
        Task(name="Task 1", completed=False, due=base_date, overdue=True),
        Task(name="Task 2", completed=False, due=base_date + timedelta(days=5), overdue=True),
        Task(name="Task 3", completed=False, due=base_date + timedelta(days=10), overdue=True),
        Task(name="Task without date", completed=False),
    ]


class TestOverdueFilter:
    def test_hides_overdue(self, overdue_tasks):
        result = OverdueFilter(show_overdue=False).apply(overdue_tasks)
        assert [t.name for t in result] == ["Task due today", "No due date task"]

    def test_show_overdue_is_identity(self, overdue_tasks):
        assert OverdueFilter(show_overdue=True).apply(overdue_tasks) == overdue_tasks

    def test_does_not_mutate_input(self, overdue_tasks):
        original = list(overdue_tasks)
        OverdueFilter(show_overdue=False).apply(overdue_tasks)
        assert overdue_tasks == original


class TestDateRangeFilter:
    @pytest.mark.parametrize(
        "from_days, to_days, expected",
        [
            (0, 10, ["Task 1", "Task 2", "Task 3"]),
            (5, None, ["Task 2", "Task 3"]),
            (None, 5, ["Task 1", "Task 2"]),
            (None, None, ["Task 1", "Task 2", "Task 3", "Task without date"]),
            (1, 9, ["Task 2"]),
            (11, None, []),
        ],
    )
    def test_ranges(self, dated_tasks, base_date, from_days, to_days, expected):
        date_from = base_date + timedelta(days=from_days) if from_days is not None else None
        date_to = base_date + timedelta(days=to_days) if to_days is not None else None
        result = DateRangeFilter(date_from=date_from, date_to=date_to).apply(dated_tasks)
        assert [t.name for t in result] == expected

    def test_bounds_are_inclusive(self, base_date):
        task = Task(name="Edge", completed=False, due=base_date)
        assert DateRangeFilter(date_from=base_date, date_to=base_date).includes(task)

    def test_missing_due_excluded_with_any_bound(self, base_date):
        task = Task(name="Undated", completed=False)
        assert not DateRangeFilter(date_from=base_date).includes(task)
        assert not DateRangeFilter(date_to=base_date).includes(task)

    def test_relative_bounds(self, today):
        clock = FixedClock(today)
        tasks = [
            Task(name="Today", completed=False, due=today),
            Task(name="In 5 days", completed=False, due=today + timedelta(days=5)),
            Task(name="In 10 days", completed=False, due=today + timedelta(days=10)),
            Task(name="Undated", completed=False),
        ]
        cases = [
            ("-1d", "+2w", 3),
            (None, "+1w", 2),
            ("-1d", None, 3),
            (None, None, 4),
        ]
        for date_from, date_to, expected_count in cases:
            task_filter = DateRangeFilter(
                date_from=resolve_date(date_from, clock),
                date_to=resolve_date(date_to, clock),
            )
            assert len(task_filter.apply(tasks)) == expected_count


class TestFilterPipeline:
    def test_empty_is_identity(self, overdue_tasks):
        pipeline = FilterPipeline()
        assert len(pipeline) == 0
        assert pipeline.apply(overdue_tasks) == overdue_tasks

    def test_add_chains(self):
        pipeline = FilterPipeline().add(OverdueFilter()).add(DateRangeFilter())
        assert len(pipeline) == 2

    def test_applies_in_sequence(self, dated_tasks, base_date):
        pipeline = FilterPipeline()
        pipeline.add(DateRangeFilter(date_from=base_date + timedelta(days=5)))
        pipeline.add(OverdueFilter(show_overdue=True))
        assert [t.name for t in pipeline.apply(dated_tasks)] == ["Task 2", "Task 3"]

    def test_each_filter_sees_previous_output(self, dated_tasks):
        seen = []

        class RecordingFilter:
            def apply(self, tasks):
                seen.append([t.name for t in tasks])
                return tasks[:1]

        pipeline = FilterPipeline().add(RecordingFilter()).add(RecordingFilter())
        result = pipeline.apply(dated_tasks)

        assert seen == [
            ["Task 1", "Task 2", "Task 3", "Task without date"],
            ["Task 1"],
        ]
        assert [t.name for t in result] == ["Task 1"]

    def test_overdue_and_range_combined(self, today):
        tasks = [
            Task(name="Late", completed=False, due=today - timedelta(days=2), overdue=True),
            Task(name="Soon", completed=False, due=today + timedelta(days=2)),
            Task(name="Later", completed=False, due=today + timedelta(days=30)),
            Task(name="Undated", completed=False),
        ]
        pipeline = build_pipeline(
            show_overdue=False,
            date_from=today - timedelta(days=7),
            date_to=today + timedelta(days=7),
        )
        assert [t.name for t in pipeline.apply(tasks)] == ["Soon"]


class TestBuildPipeline:
    def test_defaults_pass_everything(self, overdue_tasks):
        assert build_pipeline().apply(overdue_tasks) == overdue_tasks

    def test_filter_order(self):
        pipeline = build_pipeline(show_overdue=False)
        assert isinstance(pipeline.filters[0], OverdueFilter)
        assert isinstance(pipeline.filters[1], DateRangeFilter)
