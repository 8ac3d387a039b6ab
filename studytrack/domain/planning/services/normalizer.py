"""
Domain service turning arbitrary plan/task payloads into canonical entities.

This is a pure domain service with no infrastructure dependencies. It never
raises: unparsable or missing fields degrade to documented defaults so that
analytics keep working on partial and legacy records.
"""

from collections.abc import Callable, Mapping
from typing import Any

from studytrack.domain.common.value_objects import PlanId, TaskId
from studytrack.domain.planning.entities import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    PRIORITIES,
    Plan,
    Task,
    is_status,
)
from studytrack.utils import coerce_minutes, parse_instant

# Wire keys first, then the snake_case spelling used by in-process callers
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "created_at": ("createdAt", "created_at"),
    "start_at": ("startAt", "start_at"),
    "due_date": ("dueDate", "due_date"),
    "completed_at": ("completedAt", "completed_at"),
    "tracked_minutes": ("trackedMinutes", "tracked_minutes"),
}


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among keys."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _field(raw: Mapping[str, Any], name: str) -> Any:
    return _pick(raw, *_FIELD_ALIASES[name])


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _choice(value: Any, allowed: tuple[str, ...], default: str) -> Any:
    return value if isinstance(value, str) and value in allowed else default


def _status(value: Any) -> Any:
    return value if is_status(value) else DEFAULT_STATUS


def _raw_id(value: Any) -> str | None:
    """Extract a usable identifier from a string, number or nested {_id/id} object."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Mapping):
        return _raw_id(_pick(value, "_id", "id"))
    text = str(value).strip()
    return text or None


def _tags(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, list | tuple):
        return []
    return [str(tag) for tag in value if tag is not None and str(tag).strip()]


class PlanNormalizer:
    """
    Stateless domain service normalizing plans and tasks.

    Canonical rules:
    - id: ``id``, then ``_id``, then ``planId``/``taskId``; else generated
    - timestamps: parsed leniently; invalid values count as absent
    - start_at defaults to created_at; due_date to start_at, then created_at
    - tracked_minutes: non-negative integer, rounded
    - status/priority/category: known values only, else the default
    - plans: tasks normalized first, then due_date rolled up

    Normalizing an already-canonical record returns an equal record.
    """

    def __init__(
        self,
        plan_id_factory: Callable[[], PlanId] = PlanId.generate,
        task_id_factory: Callable[[], TaskId] = TaskId.generate,
    ) -> None:
        self._plan_id_factory = plan_id_factory
        self._task_id_factory = task_id_factory

    def normalize_task(self, raw: Mapping[str, Any] | Task | None) -> Task:
        """
        Normalize a raw task payload.

        Args:
            raw: Store payload, snake_case mapping or Task entity

        Returns:
            Canonical Task
        """
        data = self._as_mapping(raw)

        raw_id = _raw_id(_pick(data, "id", "_id", "taskId"))
        task_id = TaskId(raw_id) if raw_id else self._task_id_factory()

        created_at = parse_instant(_field(data, "created_at"))
        start_at = parse_instant(_field(data, "start_at")) or created_at
        due_date = parse_instant(_field(data, "due_date")) or start_at or created_at

        return Task(
            id=task_id,
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            status=_status(data.get("status")),
            priority=_choice(data.get("priority"), PRIORITIES, DEFAULT_PRIORITY),
            created_at=created_at,
            start_at=start_at,
            due_date=due_date,
            completed_at=parse_instant(_field(data, "completed_at")),
            tracked_minutes=coerce_minutes(_field(data, "tracked_minutes")),
        )

    def normalize_plan(self, raw: Mapping[str, Any] | Plan | None) -> Plan:
        """
        Normalize a raw plan payload, including its tasks.

        Args:
            raw: Store payload, snake_case mapping or Plan entity

        Returns:
            Canonical Plan with due date rolled up from its tasks
        """
        data = self._as_mapping(raw)

        raw_id = _raw_id(_pick(data, "id", "_id", "planId"))
        plan_id = PlanId(raw_id) if raw_id else self._plan_id_factory()

        raw_tasks = data.get("tasks")
        tasks = (
            [self.normalize_task(task) for task in raw_tasks if task is not None]
            if isinstance(raw_tasks, list | tuple)
            else []
        )

        plan = Plan(
            id=plan_id,
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            status=_status(data.get("status")),
            category=_choice(data.get("category"), CATEGORIES, DEFAULT_CATEGORY),
            tags=_tags(data.get("tags")),
            due_date=parse_instant(_field(data, "due_date")),
            tasks=tasks,
        )
        plan.roll_up_due_date()
        return plan

    def normalize_plans(self, raw_plans: Any) -> list[Plan]:
        """Normalize a list of plan payloads; anything that is not a list yields []."""
        if not isinstance(raw_plans, list | tuple):
            return []
        return [self.normalize_plan(raw) for raw in raw_plans if raw is not None]

    @staticmethod
    def _as_mapping(raw: Any) -> Mapping[str, Any]:
        if isinstance(raw, Plan | Task):
            return raw.to_primitive()
        if isinstance(raw, Mapping):
            return raw
        return {}
