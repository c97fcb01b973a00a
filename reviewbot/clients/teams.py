"""Teams resource client."""

from typing import TYPE_CHECKING

from reviewbot.clients.collaborators import parse_permission
from reviewbot.types.repos import Team

if TYPE_CHECKING:
    from reviewbot.transport import HTTPTransport


class TeamsClient:
    """Client for team access and membership."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the teams client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list_for_repo(self, owner: str, repo: str) -> list[Team]:
        """
        List the teams with access to a repository.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            List of Team objects with the team's repository permission

        Raises:
            NotFoundError: If the repository is not found
        """
        teams = self.transport.paginate(f"/repos/{owner}/{repo}/teams")
        return [
            Team(
                slug=team["slug"],
                name=team.get("name", team["slug"]),
                permission=parse_permission(team, role_key="permission"),
            )
            for team in teams
        ]

    def members(self, org: str, slug: str) -> list[str]:
        """
        List the logins of a team's members, including child teams.

        Args:
            org: Organization owning the team
            slug: Team slug

        Returns:
            Member logins

        Raises:
            NotFoundError: If the team is not found
        """
        members = self.transport.paginate(f"/orgs/{org}/teams/{slug}/members")
        return [member["login"] for member in members]
