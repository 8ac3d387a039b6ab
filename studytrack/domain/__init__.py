"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Plans and tasks with identity and lifecycle
- Value Objects: Progress entries, segments, trend series, comparisons
- Domain Services: Normalization and stateless progress aggregation
"""
