"""Tests for PlanNormalizer domain service."""

import itertools
import json
from datetime import UTC, datetime
from typing import Any

import pytest

from studytrack.domain.common.value_objects import PlanId, TaskId
from studytrack.domain.planning.entities import Plan, Task
from studytrack.domain.planning.services import PlanNormalizer


def _sequential_normalizer() -> PlanNormalizer:
    plan_ids = itertools.count(1)
    task_ids = itertools.count(1)
    return PlanNormalizer(
        plan_id_factory=lambda: PlanId(f"generated-plan-{next(plan_ids)}"),
        task_id_factory=lambda: TaskId(f"generated-task-{next(task_ids)}"),
    )


def _raw_plan(**overrides: Any) -> dict[str, Any]:
    plan: dict[str, Any] = {
        "_id": "p1",
        "title": "Math",
        "description": "Calculus",
        "status": "in-progress",
        "category": "personal",
        "tags": ["exam", None, ""],
        "tasks": [
            {
                "_id": "t1",
                "title": "Limits",
                "createdAt": "2024-01-01T08:00:00Z",
                "dueDate": "2024-01-05T00:00:00Z",
                "trackedMinutes": 30,
            },
            {
                "id": "t2",
                "title": "Derivatives",
                "createdAt": 1704067200000,
                "dueDate": "2024-02-10T00:00:00Z",
                "status": "completed",
                "completedAt": "2024-02-01T12:00:00.123456Z",
            },
        ],
    }
    plan.update(overrides)
    return plan


class TestNormalizeTask:
    def test_identifier_precedence(self) -> None:
        normalizer = PlanNormalizer()
        assert normalizer.normalize_task({"id": "a", "_id": "b", "taskId": "c"}).id == TaskId("a")
        assert normalizer.normalize_task({"_id": "b", "taskId": "c"}).id == TaskId("b")
        assert normalizer.normalize_task({"taskId": "c"}).id == TaskId("c")
        assert normalizer.normalize_task({"_id": {"_id": "nested"}}).id == TaskId("nested")
        assert normalizer.normalize_task({"_id": 42}).id == TaskId("42")

    def test_missing_identifier_is_generated(self) -> None:
        normalizer = _sequential_normalizer()
        assert normalizer.normalize_task({}).id == TaskId("generated-task-1")
        assert normalizer.normalize_task({"id": "  "}).id == TaskId("generated-task-2")

    def test_default_generator_uses_prefix(self) -> None:
        task = PlanNormalizer().normalize_task({"title": "x"})
        assert task.id.value.startswith("task-")

    def test_timestamp_fallback_chain(self) -> None:
        task = PlanNormalizer().normalize_task({"id": "t", "createdAt": "2024-03-01T10:00:00Z"})
        created = datetime(2024, 3, 1, 10, tzinfo=UTC)
        assert task.created_at == created
        assert task.start_at == created
        assert task.due_date == created
        assert task.completed_at is None

    def test_due_date_falls_back_to_start(self) -> None:
        task = PlanNormalizer().normalize_task(
            {"id": "t", "createdAt": "2024-03-01T10:00:00Z", "startAt": "2024-03-02T10:00:00Z"}
        )
        assert task.due_date == datetime(2024, 3, 2, 10, tzinfo=UTC)

    def test_invalid_dates_count_as_absent(self) -> None:
        task = PlanNormalizer().normalize_task(
            {
                "id": "t",
                "createdAt": "2024-03-01T10:00:00Z",
                "startAt": "not a date",
                "dueDate": {"when": "tomorrow"},
                "completedAt": "",
            }
        )
        created = datetime(2024, 3, 1, 10, tzinfo=UTC)
        assert task.start_at == created
        assert task.due_date == created
        assert task.completed_at is None

    def test_dates_outside_the_utc_range_count_as_absent(self) -> None:
        task = PlanNormalizer().normalize_task(
            {
                "id": "t",
                "createdAt": "0001-01-01T00:30:00+01:00",
                "dueDate": "9999-12-31T23:30:00-01:00",
                "completedAt": 10**400,
            }
        )
        assert task.created_at is None
        assert task.start_at is None
        assert task.due_date is None
        assert task.completed_at is None

    def test_missing_created_at_is_not_invented(self) -> None:
        task = PlanNormalizer().normalize_task({"id": "t"})
        assert task.created_at is None
        assert task.start_at is None
        assert task.due_date is None

    def test_snake_case_fields_are_accepted(self) -> None:
        task = PlanNormalizer().normalize_task(
            {"id": "t", "created_at": datetime(2024, 3, 1), "tracked_minutes": 15}
        )
        assert task.created_at == datetime(2024, 3, 1, tzinfo=UTC)
        assert task.tracked_minutes == 15

    @pytest.mark.parametrize(
        ("raw_minutes", "expected"),
        [
            (None, 0),
            (-5, 0),
            (-0.4, 0),
            (12.4, 12),
            (12.5, 13),
            ("90", 90),
            ("abc", 0),
            (float("nan"), 0),
            (float("inf"), 0),
            (True, 0),
            ([30], 0),
            (json.loads("1" + "0" * 400), 0),
        ],
    )
    def test_tracked_minutes_are_non_negative_integers(
        self, raw_minutes: Any, expected: int
    ) -> None:
        task = PlanNormalizer().normalize_task({"id": "t", "trackedMinutes": raw_minutes})
        assert task.tracked_minutes == expected
        assert isinstance(task.tracked_minutes, int)

    def test_unknown_enums_use_defaults(self) -> None:
        task = PlanNormalizer().normalize_task({"id": "t", "status": "done", "priority": "urgent"})
        assert task.status == "not-started"
        assert task.priority == "medium"

    @pytest.mark.parametrize("raw", [None, "task", 42, ["id", "t"]])
    def test_garbage_input_never_raises(self, raw: Any) -> None:
        task = PlanNormalizer().normalize_task(raw)
        assert task.title == ""
        assert task.tracked_minutes == 0

    def test_normalization_is_idempotent(self) -> None:
        normalizer = PlanNormalizer()
        raw = _raw_plan()["tasks"][1]

        once = normalizer.normalize_task(raw)
        assert normalizer.normalize_task(once) == once
        assert normalizer.normalize_task(once.to_primitive()) == once

    def test_timestamps_are_truncated_to_milliseconds(self) -> None:
        task = PlanNormalizer().normalize_task(_raw_plan()["tasks"][1])
        assert task.completed_at == datetime(2024, 2, 1, 12, 0, 0, 123000, tzinfo=UTC)


class TestNormalizePlan:
    def test_normalizes_plan_and_tasks(self) -> None:
        plan = PlanNormalizer().normalize_plan(_raw_plan())

        assert plan.id == PlanId("p1")
        assert plan.status == "in-progress"
        assert plan.category == "personal"
        assert plan.tags == ["exam"]
        assert [task.id for task in plan.tasks] == [TaskId("t1"), TaskId("t2")]
        assert plan.tasks[1].created_at == datetime(2024, 1, 1, tzinfo=UTC)

    def test_due_date_rolls_up_to_latest_task(self) -> None:
        raw = _raw_plan(dueDate="2023-12-31T00:00:00Z")
        raw["tasks"].append({"id": "t3", "title": "No dates"})

        plan = PlanNormalizer().normalize_plan(raw)

        assert plan.due_date == datetime(2024, 2, 10, tzinfo=UTC)

    def test_due_date_kept_when_no_task_has_one(self) -> None:
        plan = PlanNormalizer().normalize_plan(
            {"id": "p", "dueDate": "2024-06-01T00:00:00Z", "tasks": [{"id": "t"}]}
        )
        assert plan.due_date == datetime(2024, 6, 1, tzinfo=UTC)

    def test_plan_id_alias(self) -> None:
        assert PlanNormalizer().normalize_plan({"planId": "alias"}).id == PlanId("alias")

    def test_unknown_category_and_tags_shape(self) -> None:
        plan = PlanNormalizer().normalize_plan({"id": "p", "category": "hobby", "tags": "solo"})
        assert plan.category == "academic"
        assert plan.tags == ["solo"]

    @pytest.mark.parametrize("status", ["done", None, 3, ["completed"]])
    def test_unknown_status_uses_default(self, status: Any) -> None:
        plan = PlanNormalizer().normalize_plan({"id": "p", "status": status})
        assert plan.status == "not-started"

    def test_tasks_that_are_not_a_list(self) -> None:
        plan = PlanNormalizer().normalize_plan({"id": "p", "tasks": {"0": {"id": "t"}}})
        assert plan.tasks == []

    def test_normalization_is_idempotent(self) -> None:
        normalizer = PlanNormalizer()
        once = normalizer.normalize_plan(_raw_plan())

        assert normalizer.normalize_plan(once) == once
        assert normalizer.normalize_plan(once.to_primitive()) == once

    def test_accepts_entities(self) -> None:
        plan = Plan(
            id=PlanId("p"),
            title="Reading",
            tasks=[Task(id=TaskId("t"), title="Chapter 1", tracked_minutes=20)],
        )
        assert PlanNormalizer().normalize_plan(plan) == plan

    def test_normalize_plans(self) -> None:
        normalizer = _sequential_normalizer()
        plans = normalizer.normalize_plans([{"title": "A"}, None, {"id": "b"}])
        assert [plan.id for plan in plans] == [PlanId("generated-plan-1"), PlanId("b")]
        assert normalizer.normalize_plans({"taskPlans": []}) == []
