"""Repository collaborators resource client."""

from typing import TYPE_CHECKING, Any

from reviewbot.types.policy import Permission
from reviewbot.types.repos import Collaborator

if TYPE_CHECKING:
    from reviewbot.transport import HTTPTransport

# Highest permission first, for payloads without a role_name
_PERMISSION_ORDER = [
    ("admin", Permission.ADMIN),
    ("maintain", Permission.MAINTAIN),
    ("push", Permission.WRITE),
    ("triage", Permission.TRIAGE),
    ("pull", Permission.READ),
]


def parse_permission(user: dict[str, Any], role_key: str = "role_name") -> Permission:
    """
    Determine a collaborator's or team's permission from an API payload.

    Prefers the role under role_key ("role_name" for collaborators,
    "permission" for teams); falls back to the highest true flag in
    "permissions". Custom repository roles fall back the same way.
    """
    role_name = user.get(role_key)
    if role_name:
        try:
            return Permission.from_github(role_name)
        except ValueError:
            pass

    flags = user.get("permissions") or {}
    for flag, permission in _PERMISSION_ORDER:
        if flags.get(flag):
            return permission
    return Permission.READ


class CollaboratorsClient:
    """Client for repository collaborator listings."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the collaborators client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def list(self, owner: str, repo: str, affiliation: str = "all") -> list[Collaborator]:
        """
        List repository collaborators with their permission.

        Args:
            owner: Repository owner
            repo: Repository name
            affiliation: "outside", "direct", or "all"

        Returns:
            List of Collaborator objects

        Raises:
            NotFoundError: If the repository is not found
            AuthorizationError: If the token cannot read collaborators
        """
        users = self.transport.paginate(
            f"/repos/{owner}/{repo}/collaborators",
            params={"affiliation": affiliation},
        )
        return [
            Collaborator(login=user["login"], permission=parse_permission(user))
            for user in users
        ]
