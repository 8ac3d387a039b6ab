"""
Pagination types for list requests against the task store.

Example:
    plans = await planning_service.load_plans(Pagination(page=2, page_size=50))
"""

from dataclasses import dataclass
from typing import Any

# Maximum allowed page size
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list requests.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 50

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Number of items before this page."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Return the limit for list requests."""
        return self.page_size

    def to_query_params(self) -> dict[str, Any]:
        """Query parameters understood by the task store's list endpoint."""
        return {"page": self.page, "limit": self.page_size}
