"""Infrastructure layer - Adapters for the roster's external collaborators.

This layer contains implementations of domain protocols (ports):
- persistence/: Database engine, ORM models and repositories
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
