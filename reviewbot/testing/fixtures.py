"""
Pytest fixtures for reviewbot testing.

Provides common fixtures and builders for policy result trees and mock
repository contexts.
"""

import random
from typing import Any, Generator

import pytest

from reviewbot.signers import RS256Signer
from reviewbot.testing.mock import MockRepositoryContext
from reviewbot.types.policy import (
    AdminScope,
    EvaluationStatus,
    Permission,
    Result,
    ReviewRequestRule,
)


# ============================================================================
# Context Fixtures
# ============================================================================


@pytest.fixture
def mock_context() -> Generator[MockRepositoryContext, None, None]:
    """
    Provide a MockRepositoryContext with a small organization.

    - author "mona" (write), "hubot" and "octocat" (write), "admin-alice" (admin)
    - team "octo-org/core" with hubot and octocat
    - org "octo-org" with everyone; owner "admin-alice"

    Example:
        ```python
        def test_my_feature(mock_context, seeded_rng):
            result = create_result(create_pending_leaf(create_rule(users=["hubot"])))
            assert find_random_requesters(mock_context, result, seeded_rng)
        ```
    """
    prctx = MockRepositoryContext(
        author="mona",
        owner="octo-org",
        repo="hello-world",
        collaborators={
            "mona": Permission.WRITE,
            "hubot": Permission.WRITE,
            "octocat": Permission.WRITE,
            "admin-alice": Permission.ADMIN,
        },
        teams={"core": Permission.WRITE, "maintainers": Permission.ADMIN},
        team_members={
            "octo-org/core": ["hubot", "octocat"],
            "octo-org/maintainers": ["admin-alice"],
        },
        org_members={"octo-org": ["mona", "hubot", "octocat", "admin-alice"]},
        org_owners={"octo-org": ["admin-alice"]},
    )
    yield prctx
    prctx.reset()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a deterministic random source."""
    return random.Random(1234)


# ============================================================================
# Signer Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def rs256_signer() -> RS256Signer:
    """
    Provide a generated RSA signer for testing.

    Session scoped because RSA key generation is slow.
    """
    return RS256Signer.generate()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_rule() -> ReviewRequestRule:
    """Provide a rule asking one reviewer from explicit users."""
    return create_rule(users=["hubot", "octocat"], required_count=1)


@pytest.fixture
def sample_result(sample_rule: ReviewRequestRule) -> Result:
    """Provide a pending root with one pending leaf."""
    return create_result(create_pending_leaf(sample_rule))


# ============================================================================
# Helper Functions
# ============================================================================


def create_rule(
    users: list[str] | None = None,
    required_count: int = 1,
    **kwargs: Any,
) -> ReviewRequestRule:
    """
    Create a ReviewRequestRule with customizable fields.

    Args:
        users: Explicit reviewer logins
        required_count: Number of reviewers to request
        **kwargs: Additional fields to override

    Returns:
        ReviewRequestRule object
    """
    defaults: dict[str, Any] = {
        "teams": [],
        "organizations": [],
        "write_collaborators": False,
        "admins": False,
        "admin_scope": AdminScope.USER,
    }
    defaults.update(kwargs)
    return ReviewRequestRule(
        users=list(users or []),
        required_count=required_count,
        **defaults,
    )


def create_pending_leaf(
    rule: ReviewRequestRule | None = None,
    name: str = "pending-rule",
    **kwargs: Any,
) -> Result:
    """
    Create a childless pending Result.

    Args:
        rule: Review request rule of the leaf
        name: Rule name
        **kwargs: Additional fields to override

    Returns:
        Result object
    """
    return Result(
        status=kwargs.pop("status", EvaluationStatus.PENDING),
        name=name,
        review_request_rule=rule or create_rule(),
        **kwargs,
    )


def create_result(
    *children: Result | None,
    status: EvaluationStatus = EvaluationStatus.PENDING,
    name: str = "policy",
    **kwargs: Any,
) -> Result:
    """
    Create a Result with the given children.

    Args:
        *children: Child results; None entries are kept as-is
        status: Status of this node
        name: Node name
        **kwargs: Additional fields to override

    Returns:
        Result object
    """
    return Result(status=status, name=name, children=list(children), **kwargs)


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_context",
    "seeded_rng",
    "rs256_signer",
    "sample_rule",
    "sample_result",
    # Helper functions
    "create_rule",
    "create_pending_leaf",
    "create_result",
]
