"""Tests for task store payload schemas."""

from datetime import UTC, datetime

import pydantic
import pytest

from studytrack.schemas import PlanCreate, PlanPatch, TaskCreate, TaskPatch


class TestTaskPatch:
    def test_only_explicit_fields_are_serialized(self) -> None:
        patch = TaskPatch.model_validate({"title": "Limits", "dueDate": None})
        assert patch.to_payload() == {"title": "Limits", "dueDate": None}
        assert patch.provides("due_date")
        assert not patch.provides("start_at")

    def test_empty_patch(self) -> None:
        assert TaskPatch().is_empty()
        assert TaskPatch().to_payload() == {}

    def test_snake_case_names_are_accepted(self) -> None:
        patch = TaskPatch(completed_at=datetime(2024, 3, 13, 15, tzinfo=UTC), tracked_minutes=12)
        assert patch.to_payload() == {
            "completedAt": "2024-03-13T15:00:00.000Z",
            "trackedMinutes": 12,
        }

    def test_tracked_minutes_are_coerced(self) -> None:
        assert TaskPatch.model_validate({"trackedMinutes": -3}).tracked_minutes == 0
        assert TaskPatch.model_validate({"trackedMinutes": "20.5"}).tracked_minutes == 21

    def test_garbage_timestamp_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TaskPatch.model_validate({"startAt": "whenever"})

    def test_unknown_status_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TaskPatch.model_validate({"status": "done"})

    def test_unknown_fields_are_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            TaskPatch.model_validate({"color": "red"})


class TestCreatePayloads:
    def test_plan_create_carries_every_field(self) -> None:
        assert PlanCreate(title="Math").to_payload() == {
            "title": "Math",
            "description": "",
            "dueDate": None,
            "category": "academic",
            "tags": [],
        }

    def test_task_create_carries_every_field(self) -> None:
        payload = TaskCreate(title="Limits", due_date="2024-03-20").to_payload()
        assert payload == {
            "title": "Limits",
            "description": "",
            "priority": "medium",
            "dueDate": "2024-03-20T00:00:00.000Z",
        }

    def test_plan_patch(self) -> None:
        patch = PlanPatch.model_validate({"status": "completed", "tags": ["a"]})
        assert patch.to_payload() == {"status": "completed", "tags": ["a"]}
