"""Pytest configuration and fixtures."""

import copy
import itertools
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

import pytest

from studytrack.application.common.pagination import Pagination
from studytrack.application.planning.services import PlanningService
from studytrack.exceptions import PersistenceError
from studytrack.utils import to_iso

# A Wednesday; the reporting week runs Sunday 2024-03-10 to Sunday 2024-03-17
FIXED_NOW = datetime(2024, 3, 13, 15, 0, tzinfo=UTC)


class FakeTaskStore:
    """In-memory task store behaving like the REST API.

    Records are returned in the store's wire shape (``_id`` keys, camelCase
    fields). The task creation endpoint ignores status, timestamps and
    tracked minutes, like the real one.
    """

    def __init__(self, now: datetime) -> None:
        self.now = now
        self.plans: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.failures: dict[str, PersistenceError] = {}
        self._plan_ids = itertools.count(1)
        self._task_ids = itertools.count(1)

    def fail(self, operation: str, status_code: int = 500) -> None:
        self.failures[operation] = PersistenceError(
            f"{operation} failed", status_code=status_code, operation=operation
        )

    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if operation in self.failures:
            raise self.failures[operation]

    def _plan(self, plan_id: str) -> dict[str, Any]:
        if plan_id not in self.plans:
            raise PersistenceError("Task plan not found", status_code=404)
        return self.plans[plan_id]

    async def create_plan(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        self._record("create_plan", dict(payload))
        plan_id = f"plan-{next(self._plan_ids)}"
        plan = {"_id": plan_id, "status": "not-started", "tasks": [], **payload}
        self.plans[plan_id] = plan
        return copy.deepcopy(plan)

    async def update_plan(self, plan_id: str, patch: Mapping[str, Any]) -> dict[str, Any]:
        self._record("update_plan", plan_id, dict(patch))
        plan = self._plan(plan_id)
        plan.update(patch)
        return copy.deepcopy(plan)

    async def add_task(self, plan_id: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        self._record("add_task", plan_id, dict(payload))
        plan = self._plan(plan_id)
        task = {
            "_id": f"task-{next(self._task_ids)}",
            "title": payload["title"],
            "description": payload.get("description", ""),
            "priority": payload.get("priority", "medium"),
            "dueDate": payload.get("dueDate"),
            "status": "not-started",
            "createdAt": to_iso(self.now),
            "startAt": None,
            "completedAt": None,
            "trackedMinutes": 0,
        }
        plan["tasks"].insert(0, task)
        return copy.deepcopy(task)

    async def update_task(
        self, plan_id: str, task_id: str, patch: Mapping[str, Any]
    ) -> dict[str, Any]:
        self._record("update_task", plan_id, task_id, dict(patch))
        plan = self._plan(plan_id)
        for task in plan["tasks"]:
            if task["_id"] == task_id:
                task.update(patch)
                return copy.deepcopy(task)
        raise PersistenceError("Task not found", status_code=404)

    async def delete_plan(self, plan_id: str) -> None:
        self._record("delete_plan", plan_id)
        self._plan(plan_id)
        del self.plans[plan_id]

    async def delete_task(self, plan_id: str, task_id: str) -> None:
        self._record("delete_task", plan_id, task_id)
        plan = self._plan(plan_id)
        remaining = [task for task in plan["tasks"] if task["_id"] != task_id]
        if len(remaining) == len(plan["tasks"]):
            raise PersistenceError("Task not found", status_code=404)
        plan["tasks"] = remaining

    async def list_plans(
        self,
        pagination: Pagination,
        *,
        status: str | None = None,
        category: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> list[dict[str, Any]]:
        self._record("list_plans", pagination, {"status": status, "category": category})
        plans = [
            plan
            for plan in self.plans.values()
            if (status is None or plan.get("status") == status)
            and (category is None or plan.get("category") == category)
        ]
        return copy.deepcopy(plans[pagination.offset : pagination.offset + pagination.limit])


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant shared by store and services."""
    return FIXED_NOW


@pytest.fixture
def store(now: datetime) -> FakeTaskStore:
    """Fresh in-memory task store."""
    return FakeTaskStore(now)


@pytest.fixture
def planning_service(store: FakeTaskStore, now: datetime) -> PlanningService:
    """Planning service over the fake store with a frozen clock."""
    return PlanningService(store, clock=lambda: now)
