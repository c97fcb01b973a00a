"""reviewbot testing utilities.

Provides a mock repository context and builders for testing code that
selects reviewers.
"""

from reviewbot.testing.fixtures import (
    create_pending_leaf,
    create_result,
    create_rule,
)
from reviewbot.testing.mock import MockCall, MockRepositoryContext, MockResponse

__all__ = [
    # Mock context
    "MockRepositoryContext",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_rule",
    "create_pending_leaf",
    "create_result",
]
