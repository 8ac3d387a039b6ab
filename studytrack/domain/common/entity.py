"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Plans and tasks are entities: the task store assigns
their identity and every later update refers back to it.

Example:
    @dataclass
    class Task(Entity[TaskId]):
        id: TaskId
        title: str
        status: Status
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap the opaque string identifier
    handed out by the task store (ObjectIds, ``task_<stamp>_<rand>`` keys or
    locally generated ``<prefix>-<uuid>`` values).

    Example:
        @dataclass(frozen=True)
        class PlanId(EntityId):
            prefix: ClassVar[str] = "plan"

        plan_id = PlanId("665f1c...")
        task_id = TaskId("665f1c...")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"{self.__class__.__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh identifier for records the store has not named."""
        prefix = getattr(cls, "prefix", "id")
        return cls(f"{prefix}-{uuid4()}")

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, completed)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
