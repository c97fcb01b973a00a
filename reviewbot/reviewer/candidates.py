"""Candidate pool assembly for a single pending rule."""

import random

from reviewbot.context import RepositoryContext
from reviewbot.exceptions import AggregationError, DirectoryLookupError
from reviewbot.logging import get_logger
from reviewbot.reviewer.admins import resolve_admins
from reviewbot.types.policy import Permission, ReviewRequestRule

logger = get_logger("selection")


def select_team_members(
    prctx: RepositoryContext, teams: list[str], rng: random.Random
) -> list[str]:
    """Return the members of one team picked at random."""
    team = teams[rng.randrange(len(teams))]
    try:
        return prctx.team_members(team)
    except DirectoryLookupError as e:
        raise DirectoryLookupError(f"Failed to get member listing for team {team}") from e


def select_org_members(
    prctx: RepositoryContext, orgs: list[str], rng: random.Random
) -> list[str]:
    """Return the members of one organization picked at random."""
    org = orgs[rng.randrange(len(orgs))]
    try:
        return prctx.organization_members(org)
    except DirectoryLookupError as e:
        raise DirectoryLookupError(f"Failed to get member listing for org {org}") from e


def build_candidates(
    prctx: RepositoryContext,
    rule: ReviewRequestRule,
    rng: random.Random,
) -> list[str]:
    """
    Collect the logins that may be asked to review for a rule.

    Only one of the rule's teams and one of its organizations are used per
    call, chosen at random, to bound the pool when many are configured.
    Team and organization lookup failures are logged and skipped.

    The result never contains the PR author, and never contains a login
    outside the eligibility set: all repository collaborators normally, or
    only the resolved admins when the rule requests admins. GitHub rejects
    the whole review request if any requested login is invalid.

    Args:
        prctx: Repository and pull request being reviewed
        rule: Review request configuration of a pending leaf
        rng: Random source owned by the caller

    Returns:
        Eligible candidate logins, in no particular order

    Raises:
        AggregationError: If collaborators or admins cannot be listed
        UnsupportedScopeError: If the rule's admin scope is unknown
    """
    candidates: dict[str, None] = dict.fromkeys(rule.users)

    if rule.teams:
        try:
            candidates.update(dict.fromkeys(select_team_members(prctx, rule.teams, rng)))
        except DirectoryLookupError as e:
            logger.warning("Unable to get member listing for teams, skipping team member selection: %s", e)

    if rule.organizations:
        try:
            candidates.update(dict.fromkeys(select_org_members(prctx, rule.organizations, rng)))
        except DirectoryLookupError as e:
            logger.warning("Unable to get member listing for org, skipping org member selection: %s", e)

    try:
        collaborators = prctx.repository_collaborators()
    except DirectoryLookupError as e:
        raise AggregationError("Unable to list repository collaborators") from e

    if rule.write_collaborators:
        for user, perm in collaborators.items():
            if perm == Permission.WRITE:
                candidates[user] = None

    # Admin mode narrows eligibility to the resolved admins only
    if not rule.admins:
        eligible: dict[str, Permission] = dict(collaborators)
    else:
        try:
            admins = resolve_admins(prctx, rule.admin_scope)
        except DirectoryLookupError as e:
            raise AggregationError("Unable to select admins") from e

        eligible = {}
        for admin in admins:
            candidates[admin] = None
            eligible[admin] = Permission.ADMIN

    author = prctx.author()
    return [user for user in candidates if user in eligible and user != author]
