"""Shared fixtures for the reviewbot test suite."""

from reviewbot.testing.fixtures import (  # noqa: F401
    mock_context,
    rs256_signer,
    sample_result,
    sample_rule,
    seeded_rng,
)
