from .task_store import RawRecord, TaskStoreProtocol

__all__ = [
    "RawRecord",
    "TaskStoreProtocol",
]
