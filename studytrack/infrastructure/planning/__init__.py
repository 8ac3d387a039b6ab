"""Planning infrastructure: task store adapters."""

from .task_store_client import TaskStoreClient

__all__ = ["TaskStoreClient"]
