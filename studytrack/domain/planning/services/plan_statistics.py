"""Plan and task status statistics for a user's plan collection."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from studytrack.domain.planning.entities import COMPLETED, Plan


@dataclass(frozen=True)
class PlanStatistics:
    """Counts and completion rate over a plan collection."""

    total_plans: int
    total_tasks: int
    completed_tasks: int
    task_completion_rate: float
    plan_status_breakdown: dict[str, int] = field(default_factory=dict)
    task_status_breakdown: dict[str, int] = field(default_factory=dict)


def compute_plan_statistics(plans: Sequence[Plan]) -> PlanStatistics:
    """
    Summarize plan and task statuses.

    The completion rate is the percentage of completed tasks, rounded to
    two decimals, and 0 when there are no tasks.
    """
    plan_statuses = Counter(plan.status for plan in plans)
    task_statuses = Counter(task.status for plan in plans for task in plan.tasks)
    total_tasks = sum(task_statuses.values())
    completed = task_statuses.get(COMPLETED, 0)
    rate = round(completed / total_tasks * 100, 2) if total_tasks else 0.0

    return PlanStatistics(
        total_plans=len(plans),
        total_tasks=total_tasks,
        completed_tasks=completed,
        task_completion_rate=rate,
        plan_status_breakdown=dict(plan_statuses),
        task_status_breakdown=dict(task_statuses),
    )
