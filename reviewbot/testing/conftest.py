"""
Pytest plugin for reviewbot testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["reviewbot.testing.conftest"]

Or import the fixtures directly:

    from reviewbot.testing.fixtures import mock_context, seeded_rng
"""

# Re-export all fixtures for pytest auto-discovery
from reviewbot.testing.fixtures import (
    mock_context,
    rs256_signer,
    sample_result,
    sample_rule,
    seeded_rng,
)

__all__ = [
    "mock_context",
    "seeded_rng",
    "rs256_signer",
    "sample_rule",
    "sample_result",
]
