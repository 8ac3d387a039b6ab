"""
Task entity: a short-term unit of work owned by exactly one plan.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from studytrack.domain.common.entity import Entity
from studytrack.domain.common.exceptions import DomainError
from studytrack.domain.common.value_objects import TaskId
from studytrack.domain.planning.entities.status import (
    COMPLETED,
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    Priority,
    Status,
)
from studytrack.utils import to_iso


@dataclass
class Task(Entity[TaskId]):
    """
    Task belonging to a plan, with time tracking.

    Business Rules:
    - tracked_minutes is a non-negative integer
    - start_at defaults to created_at, due_date to start_at then created_at
      (applied by the normalizer)
    - completed_at is stamped by the planning service, never derived here
    """

    id: TaskId
    title: str
    description: str = ""
    status: Status = DEFAULT_STATUS
    priority: Priority = DEFAULT_PRIORITY
    created_at: datetime | None = None
    start_at: datetime | None = None
    due_date: datetime | None = None
    completed_at: datetime | None = None
    tracked_minutes: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not isinstance(self.tracked_minutes, int) or self.tracked_minutes < 0:
            raise DomainError("Tracked minutes must be a non-negative integer")

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED

    @property
    def started_at(self) -> datetime | None:
        """When work on the task began, falling back to its creation time."""
        return self.start_at or self.created_at

    @property
    def reference_date(self) -> datetime | None:
        """Instant used to place the task's tracked time in a reporting range."""
        return self.completed_at or self.start_at or self.created_at

    def to_primitive(self) -> dict[str, Any]:
        """Serialize to the task store's camelCase wire shape."""
        return {
            "id": self.id.to_primitive(),
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "createdAt": to_iso(self.created_at),
            "startAt": to_iso(self.start_at),
            "dueDate": to_iso(self.due_date),
            "completedAt": to_iso(self.completed_at),
            "trackedMinutes": self.tracked_minutes,
        }
