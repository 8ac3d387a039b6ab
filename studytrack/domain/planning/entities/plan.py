"""
Plan entity: a long-term goal owning an ordered list of tasks.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from studytrack.domain.common.entity import Entity
from studytrack.domain.common.value_objects import PlanId, TaskId
from studytrack.domain.planning.entities.status import (
    DEFAULT_CATEGORY,
    DEFAULT_STATUS,
    Category,
    Status,
)
from studytrack.domain.planning.entities.task import Task
from studytrack.utils import to_iso


def latest_due_date(tasks: Iterable[Task], fallback: datetime | None = None) -> datetime | None:
    """
    Latest non-null task due date, or fallback when no task has one.

    The roll-up never clears a plan's due date: a plan whose tasks carry no
    due dates keeps whatever value it already had.
    """
    due_dates = [task.due_date for task in tasks if task.due_date is not None]
    if not due_dates:
        return fallback
    return max(due_dates)


@dataclass
class Plan(Entity[PlanId]):
    """
    Plan aggregate.

    Business Rules:
    - Tasks are owned exclusively by the plan and kept in display order
      (newest additions first)
    - due_date rolls up to the latest task due date whenever tasks change
    """

    id: PlanId
    title: str
    description: str = ""
    status: Status = DEFAULT_STATUS
    category: Category = DEFAULT_CATEGORY
    tags: list[str] = field(default_factory=list)
    due_date: datetime | None = None
    tasks: list[Task] = field(default_factory=list)

    def roll_up_due_date(self) -> None:
        """Re-derive due_date from the tasks, keeping the prior value as fallback."""
        self.due_date = latest_due_date(self.tasks, self.due_date)

    def find_task(self, task_id: TaskId) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def with_task(self, task: Task) -> "Plan":
        """
        Copy of this plan with task merged in.

        An existing task with the same id is replaced in place; a new task is
        prepended. The copy's due date is rolled up; this plan is untouched.
        """
        if self.find_task(task.id) is not None:
            tasks = [task if existing.id == task.id else existing for existing in self.tasks]
        else:
            tasks = [task, *self.tasks]
        updated = replace(self, tasks=tasks, tags=list(self.tags))
        updated.roll_up_due_date()
        return updated

    def without_task(self, task_id: TaskId) -> "Plan":
        """Copy of this plan without the given task, due date rolled up."""
        tasks = [task for task in self.tasks if task.id != task_id]
        updated = replace(self, tasks=tasks, tags=list(self.tags))
        updated.roll_up_due_date()
        return updated

    def to_primitive(self) -> dict[str, Any]:
        """Serialize to the task store's camelCase wire shape."""
        return {
            "id": self.id.to_primitive(),
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "category": self.category,
            "tags": list(self.tags),
            "dueDate": to_iso(self.due_date),
            "tasks": [task.to_primitive() for task in self.tasks],
        }
