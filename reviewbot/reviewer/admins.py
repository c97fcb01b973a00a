"""Administrator resolution for admin-only review rules."""

from reviewbot.context import RepositoryContext
from reviewbot.exceptions import DirectoryLookupError, UnsupportedScopeError
from reviewbot.logging import get_logger
from reviewbot.types.policy import AdminScope, Permission

logger = get_logger("selection")


def _parse_scope(scope: AdminScope | str) -> AdminScope:
    try:
        return AdminScope(scope)
    except ValueError:
        raise UnsupportedScopeError(scope) from None


def resolve_admins(prctx: RepositoryContext, scope: AdminScope | str) -> list[str]:
    """
    Resolve the administrators of a repository at the given scope.

    - user: direct collaborators with admin permission
    - team: members of every team holding admin permission on the repository
    - org: owners of the organization that owns the repository

    Args:
        prctx: Repository being reviewed
        scope: How widely administrators are resolved

    Returns:
        Admin logins

    Raises:
        UnsupportedScopeError: If scope is not a known AdminScope
        DirectoryLookupError: If any directory query fails
    """
    admin_scope = _parse_scope(scope)

    if admin_scope is AdminScope.USER:
        logger.debug("Selecting admin users with direct collaboration rights")
        try:
            collaborators = prctx.direct_repository_collaborators()
        except DirectoryLookupError as e:
            raise DirectoryLookupError(
                f"Unable to get list of direct collaborators on {prctx.repository_name()}"
            ) from e

        return [user for user, perm in collaborators.items() if perm == Permission.ADMIN]

    if admin_scope is AdminScope.TEAM:
        logger.debug("Selecting admin users from teams")
        try:
            teams = prctx.teams()
        except DirectoryLookupError as e:
            raise DirectoryLookupError("Unable to get list of team collaborators") from e

        admins: list[str] = []
        for team, perm in teams.items():
            if perm != Permission.ADMIN:
                continue
            try:
                admins.extend(prctx.team_members(f"{prctx.repository_owner()}/{team}"))
            except DirectoryLookupError as e:
                raise DirectoryLookupError(f"Unable to get list of members for {team}") from e
        return list(dict.fromkeys(admins))

    logger.debug("Selecting admin users from the org")
    owner = prctx.repository_owner()
    try:
        return list(prctx.organization_owners(owner))
    except DirectoryLookupError as e:
        raise DirectoryLookupError(f"Unable to get list of org owners for {owner}") from e
