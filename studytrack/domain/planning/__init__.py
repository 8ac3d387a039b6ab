"""Planning module domain layer."""

from .entities import Plan, Task
from .services import PlanNormalizer

__all__ = [
    "Plan",
    "PlanNormalizer",
    "Task",
]
