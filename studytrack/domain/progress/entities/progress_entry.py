"""
ProgressEntry value object: one analytics record per task.

Entries are derived on demand from the plan collection and never persisted.
"""

from dataclasses import dataclass
from datetime import datetime

from studytrack.domain.common.value_object import ValueObject
from studytrack.domain.planning.entities import Status, Task


@dataclass(frozen=True)
class ProgressTag(ValueObject):
    """Plan label plus the color variant assigned to it for this report."""

    label: str
    variant: str


@dataclass(frozen=True)
class PlanRef(ValueObject):
    """Lightweight reference to the plan an entry came from."""

    id: str
    title: str
    description: str
    status: Status


@dataclass(frozen=True)
class ProgressEntry(ValueObject):
    """
    Flattened time-tracking record for a single task.

    Attributes:
        id: ``progress-<task id>``
        name: Task title
        plan_ref: Owning plan
        task_ref: The task itself
        tag: Plan title and color variant
        minutes: Tracked minutes of the task
        reference_date: completed_at, else start_at, else created_at
        start_date: start_at, else created_at
        finish_date: completed_at
    """

    id: str
    name: str
    plan_ref: PlanRef
    task_ref: Task
    tag: ProgressTag
    minutes: int
    reference_date: datetime | None
    start_date: datetime | None
    finish_date: datetime | None

    @property
    def plan_id(self) -> str:
        return self.plan_ref.id

    @property
    def task_id(self) -> str:
        return self.task_ref.id.value
