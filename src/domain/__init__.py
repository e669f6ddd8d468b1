"""Domain layer - Pure business logic.

This layer contains the roster entities, enums, field types, protocols
(ports) and integrity errors. It has NO dependencies on infrastructure.

Structure:
- entities/: Company, Employee and the read models that combine them
- enums/: Department
- protocols/: Repository and logger interfaces
- validators/ and types.py: Field format rules
- errors/: Constraint and referential integrity errors

The domain layer defines WHAT the roster is, not HOW it's stored.
"""
