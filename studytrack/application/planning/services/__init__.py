"""Application layer services for the planning bounded context."""

from studytrack.application.planning.services.plan_collection import PlanCollection
from studytrack.application.planning.services.planning_service import (
    DEFAULT_PLAN_TITLE,
    DEFAULT_TASK_TITLE,
    PlanningService,
    TaskStatusChange,
)

__all__ = [
    "DEFAULT_PLAN_TITLE",
    "DEFAULT_TASK_TITLE",
    "PlanCollection",
    "PlanningService",
    "TaskStatusChange",
]
