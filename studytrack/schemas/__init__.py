from .task_plan_schemas import PlanCreate, PlanPatch, StorePayload, TaskCreate, TaskPatch

__all__ = [
    "PlanCreate",
    "PlanPatch",
    "StorePayload",
    "TaskCreate",
    "TaskPatch",
]
