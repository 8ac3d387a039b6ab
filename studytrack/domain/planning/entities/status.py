"""
Status, priority and category vocabularies shared by plans and tasks.

Status transitions are unrestricted: any status can be reached from any
other. Side effects (completion stamping) depend only on the target status.
"""

from typing import Final, Literal

Status = Literal["not-started", "in-progress", "cancelled", "completed"]
Priority = Literal["low", "medium", "high"]
Category = Literal["academic", "personal", "work"]

STATUSES: Final[tuple[Status, ...]] = ("not-started", "in-progress", "cancelled", "completed")
PRIORITIES: Final[tuple[Priority, ...]] = ("low", "medium", "high")
CATEGORIES: Final[tuple[Category, ...]] = ("academic", "personal", "work")

DEFAULT_STATUS: Final[Status] = "not-started"
COMPLETED: Final[Status] = "completed"
DEFAULT_PRIORITY: Final[Priority] = "medium"
DEFAULT_CATEGORY: Final[Category] = "academic"


def is_status(value: object) -> bool:
    """Whether value is one of the four plan/task statuses."""
    return isinstance(value, str) and value in STATUSES
