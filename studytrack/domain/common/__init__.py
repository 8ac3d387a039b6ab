"""
Domain common module.

Contains base classes shared by every domain module:
- Entity / EntityId: Identity-bearing objects
- ValueObject: Immutable attribute-defined objects
- DomainError hierarchy
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, EntityNotFoundError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
    "ValueObject",
]
