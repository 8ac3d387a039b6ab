from .plan import Plan, latest_due_date
from .status import (
    CATEGORIES,
    COMPLETED,
    DEFAULT_CATEGORY,
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    PRIORITIES,
    STATUSES,
    Category,
    Priority,
    Status,
    is_status,
)
from .task import Task

__all__ = [
    "CATEGORIES",
    "COMPLETED",
    "DEFAULT_CATEGORY",
    "DEFAULT_PRIORITY",
    "DEFAULT_STATUS",
    "PRIORITIES",
    "STATUSES",
    "Category",
    "Plan",
    "Priority",
    "Status",
    "Task",
    "is_status",
    "latest_due_date",
]
