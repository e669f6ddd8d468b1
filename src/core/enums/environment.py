"""Application environment types.

Used by Settings to pick environment-specific behavior (log rendering).

Environments:
- DEVELOPMENT: Local use, human-readable console logs
- TESTING: Automated test execution (JSON logs)
- CI: Continuous integration (JSON logs)
- PRODUCTION: Deployed tool (JSON logs)
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
