"""Runtime environment types.

Used by Settings and the logger factory to choose output rendering.

Environments:
- DEVELOPMENT: Local runs, human-readable colored logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration (docs generated in pipelines), JSON logs
- PRODUCTION: Release builds, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
