"""Domain service for filtering a plan's tasks by search text and status."""

from typing import Literal

from studytrack.domain.planning.entities import Plan, Status, Task

StatusFilter = Status | Literal["all"]


def filter_tasks(plan: Plan, query: str = "", status: StatusFilter = "all") -> list[Task]:
    """
    Tasks of a plan matching a search query and status.

    Args:
        plan: Plan whose tasks are filtered
        query: Case-insensitive substring matched against title and description
        status: A task status, or "all" to keep every status

    Returns:
        Matching tasks in the plan's order
    """
    needle = query.strip().lower()
    matches = []
    for task in plan.tasks:
        if needle and needle not in task.title.lower() and needle not in task.description.lower():
            continue
        if status != "all" and task.status != status:
            continue
        matches.append(task)
    return matches
