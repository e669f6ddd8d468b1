"""Test suite for the company roster.

Test structure:
- unit/: Validation, services (mocked repositories), config, CLI dispatch
- integration/: Repositories and services against in-memory SQLite
"""
