"""
Application common module.

Contains types shared by application services:
- Pagination: Page parameters for list requests
"""

from .pagination import MAX_PAGE_SIZE, Pagination

__all__ = [
    "MAX_PAGE_SIZE",
    "Pagination",
]
