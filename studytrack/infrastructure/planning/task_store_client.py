"""Task store REST API client."""

from collections.abc import Mapping, Sequence
from typing import Any, Self

import httpx
import structlog

from studytrack.application.common.pagination import Pagination
from studytrack.application.planning.protocols.task_store import RawRecord
from studytrack.config import Settings
from studytrack.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

# Status code reported when the store could not be reached at all
UNREACHABLE_STATUS_CODE = 503


def _unwrap(data: Any, key: str) -> Any:
    """Return data[key] for enveloped responses, else the body itself."""
    if isinstance(data, Mapping) and data.get(key) is not None:
        return data[key]
    return data


class TaskStoreClient:
    """HTTP client for the task plan REST API.

    Implements TaskStoreProtocol. Every transport or HTTP error is raised as
    PersistenceError; nothing is retried here.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, headers=headers, transport=transport
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> Self:
        return cls(
            settings.TASK_STORE_URL,
            token=settings.TASK_STORE_TOKEN,
            timeout=settings.TASK_STORE_TIMEOUT,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(self, operation: str, method: str, path: str, **kwargs: Any) -> Any:
        """Make an API request and decode its JSON body."""
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json() if response.content else {}
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                "task_store_request_failed",
                operation=operation,
                path=path,
                status_code=status_code,
            )
            raise PersistenceError(
                f"Task store rejected {operation} with status {status_code}",
                status_code=status_code,
                operation=operation,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "task_store_request_failed", operation=operation, path=path, error=str(e)
            )
            raise PersistenceError(
                f"Task store unreachable during {operation}: {e}",
                status_code=UNREACHABLE_STATUS_CODE,
                operation=operation,
            ) from e
        except ValueError as e:
            logger.warning("task_store_invalid_response", operation=operation, path=path)
            raise PersistenceError(
                f"Task store returned an invalid response for {operation}",
                operation=operation,
            ) from e

    # --- Plan endpoints ---

    async def list_plans(
        self,
        pagination: Pagination,
        *,
        status: str | None = None,
        category: str | None = None,
        tags: Sequence[str] | None = None,
    ) -> list[RawRecord]:
        """List plans with optional filters."""
        params: dict[str, Any] = pagination.to_query_params()
        if status:
            params["status"] = status
        if category:
            params["category"] = category
        if tags:
            params["tags"] = [tag for tag in tags if tag]
        data = await self._request("list_plans", "GET", "/task-plans", params=params)
        plans = _unwrap(data, "taskPlans")
        return list(plans) if isinstance(plans, list) else []

    async def create_plan(self, payload: Mapping[str, Any]) -> RawRecord:
        """Create a plan."""
        data = await self._request("create_plan", "POST", "/task-plans", json=dict(payload))
        return _unwrap(data, "taskPlan")

    async def update_plan(self, plan_id: str, patch: Mapping[str, Any]) -> RawRecord:
        """Update fields of a plan."""
        data = await self._request(
            "update_plan", "PUT", f"/task-plans/{plan_id}", json=dict(patch)
        )
        return _unwrap(data, "taskPlan")

    async def delete_plan(self, plan_id: str) -> None:
        """Delete a plan and its tasks."""
        await self._request("delete_plan", "DELETE", f"/task-plans/{plan_id}")

    # --- Task endpoints ---

    async def add_task(self, plan_id: str, payload: Mapping[str, Any]) -> RawRecord:
        """Add a task to a plan."""
        data = await self._request(
            "add_task", "POST", f"/task-plans/{plan_id}/tasks", json=dict(payload)
        )
        return _unwrap(data, "task")

    async def update_task(
        self, plan_id: str, task_id: str, patch: Mapping[str, Any]
    ) -> RawRecord:
        """Update fields of a task."""
        data = await self._request(
            "update_task",
            "PUT",
            f"/task-plans/{plan_id}/tasks/{task_id}",
            json=dict(patch),
        )
        return _unwrap(data, "task")

    async def delete_task(self, plan_id: str, task_id: str) -> None:
        """Remove a task from a plan."""
        await self._request("delete_task", "DELETE", f"/task-plans/{plan_id}/tasks/{task_id}")
