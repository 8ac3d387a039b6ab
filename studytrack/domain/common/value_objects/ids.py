from dataclasses import dataclass
from typing import ClassVar

from ..entity import EntityId


@dataclass(frozen=True)
class PlanId(EntityId):
    """Strongly-typed plan identifier."""

    prefix: ClassVar[str] = "plan"


@dataclass(frozen=True)
class TaskId(EntityId):
    """Strongly-typed task identifier."""

    prefix: ClassVar[str] = "task"
