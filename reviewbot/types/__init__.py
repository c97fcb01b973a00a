"""reviewbot type definitions.

This module exports all data model types used by the package.
"""

from reviewbot.types.policy import (
    AdminScope,
    EvaluationStatus,
    Permission,
    Result,
    ReviewRequestRule,
)
from reviewbot.types.repos import Collaborator, Team

__all__ = [
    # Policy evaluation types
    "AdminScope",
    "EvaluationStatus",
    "Permission",
    "Result",
    "ReviewRequestRule",
    # Repository types
    "Collaborator",
    "Team",
]
