"""Reviewer selection across every pending rule of a policy result."""

import random

from reviewbot.context import RepositoryContext
from reviewbot.logging import get_logger
from reviewbot.reviewer.candidates import build_candidates
from reviewbot.reviewer.leaves import find_reviewable_leaves
from reviewbot.reviewer.sampling import sample_unique
from reviewbot.types.policy import Result

logger = get_logger("selection")


def find_random_requesters(
    prctx: RepositoryContext,
    result: Result,
    rng: random.Random,
) -> list[str]:
    """
    Pick random reviewers for every pending rule in a policy result.

    Leaves are processed in tree order and their selections concatenated.
    Any fatal error aborts the whole batch; no partial list is returned.

    Args:
        prctx: Repository and pull request being reviewed
        result: Root of the policy evaluation tree
        rng: Random source owned by the caller

    Returns:
        Logins to request review from

    Raises:
        AggregationError: If a required directory lookup fails
        UnsupportedScopeError: If a rule has an unknown admin scope
        SamplingError: If random selection breaks its uniqueness invariant
    """
    pending_leaves = find_reviewable_leaves(result)
    logger.debug("Collecting reviewers for %d pending leaf nodes", len(pending_leaves))

    requested: list[str] = []
    for leaf in pending_leaves:
        rule = leaf.review_request_rule
        candidates = build_candidates(prctx, rule, rng)

        logger.debug(
            "Found %d total candidates for review after removing author and "
            "non-collaborators; randomly selecting %d",
            len(candidates),
            rule.required_count,
        )
        requested.extend(sample_unique(rule.required_count, candidates, rng))

    return requested
