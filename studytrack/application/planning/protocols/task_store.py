"""Protocol for the remote task store in the planning context."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from studytrack.application.common.pagination import Pagination

RawRecord = Mapping[str, Any]


class TaskStoreProtocol(Protocol):
    """
    Protocol for task store operations.

    Every method is a single request/response round-trip. Returned records are
    arbitrary mappings that must be normalized before use; the store only
    promises to round-trip the fields it was given, on a best-effort basis.
    Implementations raise PersistenceError when a call fails. Timeouts,
    retries and cancellation are the implementation's concern.
    """

    async def create_plan(self, payload: Mapping[str, Any]) -> RawRecord:
        """
        Create a plan.

        Args:
            payload: Plan creation payload

        Returns:
            Raw created plan
        """
        ...

    async def update_plan(self, plan_id: str, patch: Mapping[str, Any]) -> RawRecord:
        """
        Update fields of a plan.

        Args:
            plan_id: The plan ID
            patch: Fields to change; omitted fields are left untouched

        Returns:
            Raw updated plan
        """
        ...

    async def add_task(self, plan_id: str, payload: Mapping[str, Any]) -> RawRecord:
        """
        Add a task to a plan.

        Args:
            plan_id: The owning plan ID
            payload: Task creation payload

        Returns:
            Raw created task
        """
        ...

    async def update_task(
        self, plan_id: str, task_id: str, patch: Mapping[str, Any]
    ) -> RawRecord:
        """
        Update fields of a task.

        Args:
            plan_id: The owning plan ID
            task_id: The task ID
            patch: Fields to change; omitted fields are left untouched

        Returns:
            Raw updated task
        """
        ...

    async def delete_plan(self, plan_id: str) -> None:
        """
        Delete a plan together with its tasks.

        Args:
            plan_id: The plan ID
        """
        ...

    async def delete_task(self, plan_id: str, task_id: str) -> None:
        """
        Remove a task from a plan.

        Args:
            plan_id: The owning plan ID
            task_id: The task ID
        """
        ...

    async def list_plans(
        self,
        pagination: Pagination,
        *,
        status: str | None = None,
        category: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> list[RawRecord]:
        """
        List the user's plans, newest first.

        Args:
            pagination: Page parameters
            status: Optional status filter
            category: Optional category filter
            tags: Optional tag filter (any match)

        Returns:
            Raw plans of the requested page
        """
        ...
