"""Common value objects shared across all domain modules."""

from .ids import PlanId, TaskId

__all__ = [
    "PlanId",
    "TaskId",
]
