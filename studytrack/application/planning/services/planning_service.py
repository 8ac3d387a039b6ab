"""Application service for plan and task mutations."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, TypeVar

import pydantic
import structlog

from studytrack.application.common.pagination import Pagination
from studytrack.application.planning.protocols.task_store import RawRecord, TaskStoreProtocol
from studytrack.application.planning.services.plan_collection import PlanCollection
from studytrack.domain.common.exceptions import EntityNotFoundError, ValidationError
from studytrack.domain.common.value_objects import PlanId, TaskId
from studytrack.domain.planning.entities import COMPLETED, Plan, Status, Task
from studytrack.domain.planning.services.normalizer import PlanNormalizer
from studytrack.schemas.task_plan_schemas import (
    PlanCreate,
    PlanPatch,
    StorePayload,
    TaskCreate,
    TaskPatch,
)

logger = structlog.get_logger(__name__)

DEFAULT_PLAN_TITLE = "Untitled plan"
DEFAULT_TASK_TITLE = "Untitled task"

# Task fields the creation endpoint ignores and a follow-up update must set
_RECONCILED_TIMESTAMPS = ("created_at", "start_at", "due_date", "completed_at")

PayloadT = TypeVar("PayloadT", bound=StorePayload)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class TaskStatusChange:
    """A task before and after a status change, for optimistic UI updates."""

    previous_task: Task | None
    next_task: Task


def _require_id(value: str | None, field: str) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(f"{field} is required", field=field)
    return text


def _build_payload(schema: type[PayloadT], fields: Mapping[str, Any]) -> PayloadT:
    """Validate caller-supplied fields, translating pydantic errors to domain errors."""
    try:
        return schema.model_validate(dict(fields))
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(f"Invalid {field or 'payload'}: {first['msg']}", field=field) from e


def _coerce_task_patch(partial: TaskPatch | Mapping[str, Any] | None) -> TaskPatch:
    if isinstance(partial, TaskPatch):
        return partial
    return _build_payload(TaskPatch, partial or {})


def _coerce_plan_patch(partial: PlanPatch | Mapping[str, Any] | None) -> PlanPatch:
    if isinstance(partial, PlanPatch):
        return partial
    return _build_payload(PlanPatch, partial or {})


def _with_identity(raw: RawRecord, entity_id: str, *alt_keys: str) -> dict[str, Any]:
    """Fill in the requested id when the store's response omits one."""
    data = dict(raw) if isinstance(raw, Mapping) else {}
    if all(data.get(key) is None for key in ("id", "_id", *alt_keys)):
        data["id"] = entity_id
    return data


def _extend_patch(patch: TaskPatch, **updates: Any) -> TaskPatch:
    """Copy of patch with extra explicitly-set fields."""
    fields = {name: getattr(patch, name) for name in patch.model_fields_set}
    fields.update(updates)
    return TaskPatch(**fields)


class PlanningService:
    """
    Application service owning every plan and task mutation.

    Each mutation issues one or two task store calls, normalizes the response
    and only then commits it to the plan collection. Store failures propagate
    unchanged and leave the collection as it was.
    """

    def __init__(
        self,
        store: TaskStoreProtocol,
        collection: PlanCollection | None = None,
        normalizer: PlanNormalizer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.store = store
        self.collection = collection if collection is not None else PlanCollection()
        self.normalizer = normalizer or PlanNormalizer()
        self.clock = clock

    def plans(self) -> list[Plan]:
        """Snapshot of the loaded plans."""
        return self.collection.snapshot()

    async def load_plans(
        self,
        pagination: Pagination | None = None,
        *,
        status: Status | None = None,
        category: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> list[Plan]:
        """
        Fetch one page of plans and replace the collection with it.

        Args:
            pagination: Page parameters (first page by default)
            status: Optional status filter
            category: Optional category filter
            tags: Optional tag filter

        Returns:
            Normalized plans of the page
        """
        raw_plans = await self.store.list_plans(
            pagination or Pagination(), status=status, category=category, tags=tags
        )
        plans = self.normalizer.normalize_plans(raw_plans)
        self.collection.replace_all(plans)

        logger.info("loaded_plans", count=len(plans), status=status, category=category)
        return plans

    async def create_plan(
        self,
        title: str | None,
        description: str = "",
        due_date: datetime | str | None = None,
        category: str = "academic",
        tags: Sequence[str] | None = None,
    ) -> Plan:
        """
        Create a plan and append it to the collection.

        Args:
            title: Plan title; blank titles become "Untitled plan"
            description: Plan description
            due_date: Optional explicit due date
            category: Plan category
            tags: Free-form tags

        Returns:
            Normalized created plan

        Raises:
            ValidationError: If the due date or category is invalid
            PersistenceError: If the store call fails
        """
        payload = _build_payload(
            PlanCreate,
            {
                "title": (title or "").strip() or DEFAULT_PLAN_TITLE,
                "description": description or "",
                "due_date": due_date,
                "category": category,
                "tags": list(tags or []),
            },
        )

        raw = await self.store.create_plan(payload.to_payload())
        plan = self.normalizer.normalize_plan(raw)
        self.collection.put_plan(plan)

        logger.info("created_plan", plan_id=plan.id.value, title=plan.title)
        return plan

    async def update_plan_status(self, plan_id: str | None, status: Status) -> Plan:
        """
        Change a plan's status.

        Raises:
            ValidationError: If plan_id is missing or status is unknown
            PersistenceError: If the store call fails
        """
        plan_id = _require_id(plan_id, "plan_id")
        patch = _build_payload(PlanPatch, {"status": status})
        plan = await self._apply_plan_patch(plan_id, patch)

        logger.info("updated_plan_status", plan_id=plan_id, status=plan.status)
        return plan

    async def update_plan(
        self, plan_id: str | None, partial: PlanPatch | Mapping[str, Any] | None
    ) -> Plan:
        """
        Apply a partial update to a plan.

        An empty patch makes no store call and returns the loaded plan.

        Raises:
            ValidationError: If plan_id is missing or a field is invalid
            EntityNotFoundError: If the patch is empty and the plan is not loaded
            PersistenceError: If the store call fails
        """
        plan_id = _require_id(plan_id, "plan_id")
        patch = _coerce_plan_patch(partial)

        if patch.is_empty():
            cached = self.collection.get(PlanId(plan_id))
            if cached is None:
                raise EntityNotFoundError("Plan", plan_id)
            logger.debug("plan_update_skipped", plan_id=plan_id)
            return cached

        plan = await self._apply_plan_patch(plan_id, patch)
        logger.info("updated_plan", plan_id=plan_id, fields=sorted(patch.model_fields_set))
        return plan

    async def add_task(
        self, plan_id: str | None, fields: TaskPatch | Mapping[str, Any] | None = None
    ) -> Task:
        """
        Create a task in a plan.

        The store's creation endpoint only takes title, description, priority
        and due date. Any status, timestamp or tracked minutes the caller
        supplied that the created task does not reflect are applied with a
        follow-up update. A task created as completed without a completion
        instant is stamped with the current time.

        Returns:
            The reconciled task, also prepended to its plan in the collection

        Raises:
            ValidationError: If plan_id is missing or a field is invalid
            PersistenceError: If either store call fails
        """
        plan_id = _require_id(plan_id, "plan_id")
        requested = _coerce_task_patch(fields)

        create = _build_payload(
            TaskCreate,
            {
                "title": (requested.title or "").strip() or DEFAULT_TASK_TITLE,
                "description": requested.description or "",
                "priority": requested.priority or "medium",
                "due_date": requested.due_date,
            },
        )
        raw = await self.store.add_task(plan_id, create.to_payload())
        task = self.normalizer.normalize_task(raw)

        reconcile = self._reconcile_patch(requested, task)
        if not reconcile.is_empty():
            raw = await self.store.update_task(plan_id, task.id.value, reconcile.to_payload())
            task = self.normalizer.normalize_task(_with_identity(raw, task.id.value, "taskId"))

        self.collection.put_task(PlanId(plan_id), task)

        logger.info(
            "added_task",
            plan_id=plan_id,
            task_id=task.id.value,
            reconciled=sorted(reconcile.model_fields_set),
        )
        return task

    async def update_task(
        self,
        plan_id: str | None,
        task_id: str | None,
        partial: TaskPatch | Mapping[str, Any] | None,
    ) -> Task:
        """
        Apply a partial update to a task.

        Setting status to completed without a completion instant stamps the
        current time. An empty patch makes no store call and returns the
        loaded task.

        Raises:
            ValidationError: If an id is missing or a field is invalid
            EntityNotFoundError: If the patch is empty and the task is not loaded
            PersistenceError: If the store call fails
        """
        plan_id = _require_id(plan_id, "plan_id")
        task_id = _require_id(task_id, "task_id")
        patch = _coerce_task_patch(partial)

        if patch.status == COMPLETED and not patch.provides("completed_at"):
            patch = _extend_patch(patch, completed_at=self.clock())

        if patch.is_empty():
            cached = self.collection.find_task(PlanId(plan_id), TaskId(task_id))
            if cached is None:
                raise EntityNotFoundError("Task", task_id)
            logger.debug("task_update_skipped", plan_id=plan_id, task_id=task_id)
            return cached

        raw = await self.store.update_task(plan_id, task_id, patch.to_payload())
        task = self.normalizer.normalize_task(_with_identity(raw, task_id, "taskId"))
        self.collection.put_task(PlanId(plan_id), task)

        logger.info(
            "updated_task",
            plan_id=plan_id,
            task_id=task_id,
            fields=sorted(patch.model_fields_set),
        )
        return task

    async def update_task_status(
        self, plan_id: str | None, task_id: str | None, status: Status
    ) -> TaskStatusChange:
        """
        Change a task's status, stamping or clearing its completion instant.

        Returns:
            The loaded task before the change (None if not loaded) and after it
        """
        plan_id = _require_id(plan_id, "plan_id")
        task_id = _require_id(task_id, "task_id")
        previous = self.collection.find_task(PlanId(plan_id), TaskId(task_id))

        completed_at = self.clock() if status == COMPLETED else None
        next_task = await self.update_task(
            plan_id, task_id, {"status": status, "completed_at": completed_at}
        )
        return TaskStatusChange(previous_task=previous, next_task=next_task)

    async def delete_plan(self, plan_id: str | None) -> None:
        """
        Delete a plan and drop it from the collection.

        Raises:
            ValidationError: If plan_id is missing
            PersistenceError: If the store call fails; the collection is untouched
        """
        plan_id = _require_id(plan_id, "plan_id")
        await self.store.delete_plan(plan_id)
        removed = self.collection.remove_plan(PlanId(plan_id))

        logger.info("deleted_plan", plan_id=plan_id, was_loaded=removed is not None)

    async def delete_task(self, plan_id: str | None, task_id: str | None) -> Plan | None:
        """
        Delete a task and drop it from its plan.

        Returns:
            The updated plan with its due date rolled up, or None when the
            plan is not loaded

        Raises:
            ValidationError: If an id is missing
            PersistenceError: If the store call fails; the collection is untouched
        """
        plan_id = _require_id(plan_id, "plan_id")
        task_id = _require_id(task_id, "task_id")
        await self.store.delete_task(plan_id, task_id)
        plan = self.collection.remove_task(PlanId(plan_id), TaskId(task_id))

        logger.info("deleted_task", plan_id=plan_id, task_id=task_id)
        return plan

    async def _apply_plan_patch(self, plan_id: str, patch: PlanPatch) -> Plan:
        raw = await self.store.update_plan(plan_id, patch.to_payload())
        data = _with_identity(raw, plan_id, "planId")

        cached = self.collection.get(PlanId(plan_id))
        if cached is not None and data.get("tasks") is None:
            # Responses without tasks keep the loaded ones
            data["tasks"] = list(cached.tasks)

        plan = self.normalizer.normalize_plan(data)
        self.collection.put_plan(plan)
        return plan

    def _reconcile_patch(self, requested: TaskPatch, created: Task) -> TaskPatch:
        updates: dict[str, Any] = {}

        if requested.status is not None and requested.status != created.status:
            updates["status"] = requested.status

        for name in _RECONCILED_TIMESTAMPS:
            value = getattr(requested, name)
            if value is not None and value != getattr(created, name):
                updates[name] = value

        if (
            requested.tracked_minutes is not None
            and requested.tracked_minutes != created.tracked_minutes
        ):
            updates["tracked_minutes"] = requested.tracked_minutes

        status = updates.get("status", created.status)
        if status == COMPLETED and requested.completed_at is None and created.completed_at is None:
            updates["completed_at"] = self.clock()

        return TaskPatch(**updates)
