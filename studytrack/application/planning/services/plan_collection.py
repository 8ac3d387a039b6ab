"""In-memory plan collection written only by the planning service."""

from collections.abc import Iterable, Iterator

from studytrack.domain.common.value_objects import PlanId, TaskId
from studytrack.domain.planning.entities import Plan, Task


class PlanCollection:
    """
    Ordered, single-writer collection of canonical plans.

    Writes replace Plan objects instead of mutating them, so a snapshot taken
    for reporting never observes a half-applied mutation.
    """

    def __init__(self, plans: Iterable[Plan] = ()) -> None:
        self._plans: list[Plan] = list(plans)

    def __len__(self) -> int:
        return len(self._plans)

    def __iter__(self) -> Iterator[Plan]:
        return iter(self.snapshot())

    def __contains__(self, plan_id: object) -> bool:
        return isinstance(plan_id, PlanId) and self.get(plan_id) is not None

    def snapshot(self) -> list[Plan]:
        """Shallow copy of the current plan list."""
        return list(self._plans)

    def get(self, plan_id: PlanId) -> Plan | None:
        for plan in self._plans:
            if plan.id == plan_id:
                return plan
        return None

    def find_task(self, plan_id: PlanId, task_id: TaskId) -> Task | None:
        plan = self.get(plan_id)
        return plan.find_task(task_id) if plan else None

    def replace_all(self, plans: Iterable[Plan]) -> None:
        self._plans = list(plans)

    def put_plan(self, plan: Plan) -> None:
        """Replace the plan with the same id, or append a new one."""
        for index, existing in enumerate(self._plans):
            if existing.id == plan.id:
                self._plans[index] = plan
                return
        self._plans.append(plan)

    def put_task(self, plan_id: PlanId, task: Task) -> Plan | None:
        """
        Merge a task into its plan and roll up the plan's due date.

        Returns:
            The updated plan, or None when the plan is not loaded
        """
        plan = self.get(plan_id)
        if plan is None:
            return None
        updated = plan.with_task(task)
        self.put_plan(updated)
        return updated

    def remove_plan(self, plan_id: PlanId) -> Plan | None:
        """Drop a plan, returning it, or None when it was not loaded."""
        plan = self.get(plan_id)
        if plan is not None:
            self._plans = [existing for existing in self._plans if existing.id != plan_id]
        return plan

    def remove_task(self, plan_id: PlanId, task_id: TaskId) -> Plan | None:
        """
        Drop a task from its plan and roll up the plan's due date.

        Returns:
            The updated plan, or None when the plan is not loaded
        """
        plan = self.get(plan_id)
        if plan is None:
            return None
        updated = plan.without_task(task_id)
        self.put_plan(updated)
        return updated
