"""
End-to-end tests for reviewer selection over a policy result.

Feature: reviewer-selection
"""

import random

import pytest

from reviewbot.exceptions import (
    AggregationError,
    NotFoundError,
    SamplingError,
    ServerError,
    UnsupportedScopeError,
)
from reviewbot.reviewer import find_random_requesters
from reviewbot.testing import (
    MockRepositoryContext,
    create_pending_leaf,
    create_result,
    create_rule,
)
from reviewbot.types.policy import AdminScope, EvaluationStatus, Permission

LEFT = ["alpha", "bravo", "charlie"]
RIGHT = ["delta", "echo", "foxtrot"]


def everyone_writes(*logins: str) -> dict[str, Permission]:
    return {login: Permission.WRITE for login in logins}


class TestFindRandomRequesters:
    @pytest.mark.parametrize("seed", range(20))
    def test_one_reviewer_per_leaf(self, seed: int) -> None:
        prctx = MockRepositoryContext(author="mona", collaborators=everyone_writes(*LEFT, *RIGHT))
        result = create_result(
            create_pending_leaf(create_rule(users=LEFT, required_count=1)),
            create_pending_leaf(create_rule(users=RIGHT, required_count=1)),
        )

        requested = find_random_requesters(prctx, result, random.Random(seed))

        assert len(requested) == 2
        assert requested[0] in LEFT
        assert requested[1] in RIGHT

    def test_count_capped_at_candidates(self) -> None:
        prctx = MockRepositoryContext(author="mona", collaborators=everyone_writes("a", "b"))
        result = create_result(create_pending_leaf(create_rule(users=["a", "b"], required_count=5)))

        requested = find_random_requesters(prctx, result, random.Random(7))

        assert sorted(requested) == ["a", "b"]

    def test_org_admins_without_author(self, seeded_rng) -> None:
        prctx = MockRepositoryContext(
            author="x",
            owner="octo-org",
            org_owners={"octo-org": ["x", "y"]},
        )
        rule = create_rule(admins=True, admin_scope=AdminScope.ORG, required_count=2)

        requested = find_random_requesters(prctx, create_result(create_pending_leaf(rule)), seeded_rng)

        assert requested == ["y"]

    def test_failed_team_lookup_continues(self, seeded_rng) -> None:
        prctx = MockRepositoryContext(
            author="mona",
            collaborators=everyone_writes("hubot", "octocat"),
        )
        prctx.configure_error("team_members", NotFoundError("NOT_FOUND", "no team"))
        rule = create_rule(users=["hubot"], teams=["octo-org/core"], write_collaborators=True, required_count=3)

        requested = find_random_requesters(prctx, create_result(create_pending_leaf(rule)), seeded_rng)

        assert sorted(requested) == ["hubot", "octocat"]

    def test_unknown_admin_scope_fails(self, seeded_rng) -> None:
        prctx = MockRepositoryContext(author="mona", collaborators=everyone_writes("hubot"))
        rule = create_rule(users=["hubot"], admins=True, admin_scope="galaxy")

        with pytest.raises(UnsupportedScopeError):
            find_random_requesters(prctx, create_result(create_pending_leaf(rule)), seeded_rng)

    def test_no_pending_leaves(self, seeded_rng) -> None:
        prctx = MockRepositoryContext()
        result = create_result(
            create_pending_leaf(create_rule(users=["hubot"]), status=EvaluationStatus.APPROVED),
            status=EvaluationStatus.APPROVED,
        )

        assert find_random_requesters(prctx, result, seeded_rng) == []
        assert prctx.get_calls() == []

    def test_zero_required_count(self, mock_context, seeded_rng) -> None:
        result = create_result(create_pending_leaf(create_rule(users=["hubot"], required_count=0)))

        assert find_random_requesters(mock_context, result, seeded_rng) == []

    def test_fatal_error_aborts_whole_batch(self, seeded_rng) -> None:
        prctx = MockRepositoryContext(author="mona", collaborators=everyone_writes("hubot"))
        prctx.configure_error("direct_repository_collaborators", ServerError("SERVER_ERROR", "boom"))
        result = create_result(
            create_pending_leaf(create_rule(users=["hubot"])),
            create_pending_leaf(create_rule(admins=True, admin_scope=AdminScope.USER)),
        )

        with pytest.raises(AggregationError):
            find_random_requesters(prctx, result, seeded_rng)

    def test_sampling_failure_surfaces(self, mock_context) -> None:
        class StuckRandom(random.Random):
            def randrange(self, *args, **kwargs) -> int:  # type: ignore[override]
                return 0

        result = create_result(
            create_pending_leaf(create_rule(users=["hubot", "octocat", "admin-alice"], required_count=2))
        )

        with pytest.raises(SamplingError):
            find_random_requesters(mock_context, result, StuckRandom())

    def test_same_seed_same_reviewers(self, mock_context) -> None:
        rule = create_rule(
            users=["admin-alice"],
            teams=["octo-org/core"],
            organizations=["octo-org"],
            required_count=2,
        )
        result = create_result(create_pending_leaf(rule), create_pending_leaf(rule))

        first = find_random_requesters(mock_context, result, random.Random(99))
        second = find_random_requesters(mock_context, result, random.Random(99))

        assert first == second
        assert len(first) == 4
        assert "mona" not in first
