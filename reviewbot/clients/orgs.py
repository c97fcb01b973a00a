"""Organizations resource client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reviewbot.transport import HTTPTransport


class OrgsClient:
    """Client for organization membership."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the organizations client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def members(self, org: str, role: str = "all") -> list[str]:
        """
        List the logins of an organization's members.

        Args:
            org: Organization login
            role: "all", "admin" (owners only), or "member"

        Returns:
            Member logins

        Raises:
            NotFoundError: If the organization is not found
        """
        members = self.transport.paginate(f"/orgs/{org}/members", params={"role": role})
        return [member["login"] for member in members]

    def owners(self, org: str) -> list[str]:
        """List the logins of an organization's owners."""
        return self.members(org, role="admin")
