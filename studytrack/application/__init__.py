"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system.

This layer contains:
- Services: Planning mutations and progress reporting
- Ports: Protocols for external collaborators (the task store)
"""
