from .normalizer import PlanNormalizer
from .plan_statistics import PlanStatistics, compute_plan_statistics
from .task_filter import StatusFilter, filter_tasks

__all__ = [
    "PlanNormalizer",
    "PlanStatistics",
    "StatusFilter",
    "compute_plan_statistics",
    "filter_tasks",
]
