"""
GitHub API client.

Provides the directory lookups needed for reviewer selection.
"""

import os
from typing import Any

from reviewbot.auth import AppInstallationAuth, Auth, TokenAuth
from reviewbot.clients import CollaboratorsClient, OrgsClient, TeamsClient
from reviewbot.exceptions import ConfigurationError
from reviewbot.signers import RS256Signer
from reviewbot.transport import HTTPTransport, RetryConfig


class GitHubClient:
    """
    Client for the parts of the GitHub API used by reviewbot.

    Aggregates all resource clients and handles authentication.

    Example:
        ```python
        from reviewbot import GitHubClient, TokenAuth

        client = GitHubClient(auth=TokenAuth("ghp_..."))

        # Or create from environment variables
        client = GitHubClient.from_env()

        owners = client.orgs.owners("octo-org")
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        auth: Auth,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            auth: Token or GitHub App installation credentials
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)
        """
        self.auth = auth
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            retry_config=retry_config,
        )

        self.collaborators = CollaboratorsClient(self._transport)
        self.teams = TeamsClient(self._transport)
        self.orgs = OrgsClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)
            GITHUB_TOKEN: Token to authenticate with; takes precedence when set
            GITHUB_APP_ID: GitHub App id (required without GITHUB_TOKEN)
            GITHUB_APP_PRIVATE_KEY_PATH: PEM file with the App private key
                (required without GITHUB_TOKEN)
            GITHUB_INSTALLATION_ID: App installation id (required without GITHUB_TOKEN)

        Args:
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (optional)

        Returns:
            Configured GitHubClient instance

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        base_url = os.environ.get("GITHUB_API_URL", cls.DEFAULT_BASE_URL)
        token = os.environ.get("GITHUB_TOKEN")

        if token:
            auth: Auth = TokenAuth(token)
        else:
            app_id = os.environ.get("GITHUB_APP_ID")
            key_path = os.environ.get("GITHUB_APP_PRIVATE_KEY_PATH")
            installation_id = os.environ.get("GITHUB_INSTALLATION_ID")

            if not app_id:
                raise ConfigurationError(
                    "Neither GITHUB_TOKEN nor GITHUB_APP_ID environment variable set"
                )
            if not key_path:
                raise ConfigurationError(
                    "GITHUB_APP_PRIVATE_KEY_PATH environment variable not set"
                )
            if not installation_id:
                raise ConfigurationError("GITHUB_INSTALLATION_ID environment variable not set")
            if not app_id.isdigit() or not installation_id.isdigit():
                raise ConfigurationError(
                    "GITHUB_APP_ID and GITHUB_INSTALLATION_ID must be numeric"
                )

            try:
                signer = RS256Signer.from_pem_file(key_path)
            except (OSError, ValueError, TypeError) as e:
                raise ConfigurationError(f"Unable to load GitHub App private key: {e}") from e

            auth = AppInstallationAuth(app_id, installation_id, signer)

        return cls(
            auth=auth,
            base_url=base_url,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
