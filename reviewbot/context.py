"""
Repository and pull request context for reviewer selection.

RepositoryContext is the only way reviewer selection reaches the outside
world. GitHubContext implements it on top of the GitHub API.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from reviewbot.exceptions import DirectoryLookupError
from reviewbot.types.policy import Permission

if TYPE_CHECKING:
    from reviewbot.client import GitHubClient


class RepositoryContext(ABC):
    """Directory lookups about the pull request under review.

    Every lookup may raise DirectoryLookupError.
    """

    @abstractmethod
    def author(self) -> str:
        """Login of the pull request author."""
        pass

    @abstractmethod
    def repository_owner(self) -> str:
        """Login of the user or organization owning the repository."""
        pass

    @abstractmethod
    def repository_name(self) -> str:
        """Name of the repository."""
        pass

    @abstractmethod
    def direct_repository_collaborators(self) -> dict[str, Permission]:
        """Users added to the repository directly, with their permission."""
        pass

    @abstractmethod
    def repository_collaborators(self) -> dict[str, Permission]:
        """Every user with access to the repository, however granted."""
        pass

    @abstractmethod
    def teams(self) -> dict[str, Permission]:
        """Teams with access to the repository, keyed by slug."""
        pass

    @abstractmethod
    def team_members(self, team: str) -> list[str]:
        """Members of a team given as "org/slug"."""
        pass

    @abstractmethod
    def organization_members(self, org: str) -> list[str]:
        """Members of an organization."""
        pass

    @abstractmethod
    def organization_owners(self, org: str) -> list[str]:
        """Owners of an organization."""
        pass


class GitHubContext(RepositoryContext):
    """
    RepositoryContext backed by the GitHub REST API.

    Lookups are cached for the lifetime of the instance; create one per
    policy evaluation.

    Example:
        ```python
        client = GitHubClient.from_env()
        prctx = GitHubContext(client, owner="octo-org", repo="hello", author="mona")
        reviewers = find_random_requesters(prctx, result, random.Random())
        ```
    """

    def __init__(self, client: "GitHubClient", owner: str, repo: str, author: str) -> None:
        self._client = client
        self._owner = owner
        self._repo = repo
        self._author = author

        self._collaborators: dict[str, dict[str, Permission]] = {}
        self._teams: dict[str, Permission] | None = None
        self._team_members: dict[str, list[str]] = {}
        self._org_members: dict[str, list[str]] = {}
        self._org_owners: dict[str, list[str]] = {}

    def author(self) -> str:
        return self._author

    def repository_owner(self) -> str:
        return self._owner

    def repository_name(self) -> str:
        return self._repo

    def direct_repository_collaborators(self) -> dict[str, Permission]:
        return self._collaborators_for("direct")

    def repository_collaborators(self) -> dict[str, Permission]:
        return self._collaborators_for("all")

    def _collaborators_for(self, affiliation: str) -> dict[str, Permission]:
        if affiliation not in self._collaborators:
            collaborators = self._client.collaborators.list(
                self._owner, self._repo, affiliation=affiliation
            )
            self._collaborators[affiliation] = {c.login: c.permission for c in collaborators}
        return self._collaborators[affiliation]

    def teams(self) -> dict[str, Permission]:
        if self._teams is None:
            teams = self._client.teams.list_for_repo(self._owner, self._repo)
            self._teams = {t.slug: t.permission for t in teams}
        return self._teams

    def team_members(self, team: str) -> list[str]:
        if team not in self._team_members:
            org, sep, slug = team.partition("/")
            if not sep or not org or not slug:
                raise DirectoryLookupError(
                    f"Team {team!r} must be given as organization/slug", code="INVALID_TEAM"
                )
            self._team_members[team] = self._client.teams.members(org, slug)
        return self._team_members[team]

    def organization_members(self, org: str) -> list[str]:
        if org not in self._org_members:
            self._org_members[org] = self._client.orgs.members(org)
        return self._org_members[org]

    def organization_owners(self, org: str) -> list[str]:
        if org not in self._org_owners:
            self._org_owners[org] = self._client.orgs.owners(org)
        return self._org_owners[org]
