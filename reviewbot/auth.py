"""
Credentials for the GitHub API.

Two flavours are supported: a static token (personal access token or the
GITHUB_TOKEN of an Actions run) and a GitHub App installation, which trades
a signed JWT for a short-lived installation token.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from reviewbot.exceptions import AuthenticationError
from reviewbot.logging import get_logger, log_token_exchange
from reviewbot.signers import Signer
from reviewbot.signing import build_app_jwt, decode_jwt_claims

if TYPE_CHECKING:
    from reviewbot.transport import HTTPTransport

# Installation tokens are refreshed this long before GitHub expires them
REFRESH_MARGIN = timedelta(minutes=1)

logger = get_logger("auth")


class Auth(ABC):
    """Source of the Authorization header for API requests."""

    @abstractmethod
    def authorization(self, transport: "HTTPTransport") -> str:
        """Return the Authorization header value."""
        pass


class TokenAuth(Auth):
    """Authenticate with a fixed token."""

    def __init__(self, token: str) -> None:
        self._token = token

    def authorization(self, transport: "HTTPTransport") -> str:
        return f"Bearer {self._token}"


class AppInstallationAuth(Auth):
    """
    Authenticate as a GitHub App installation.

    The installation token is cached and exchanged again shortly before it
    expires.
    """

    def __init__(self, app_id: str, installation_id: str, signer: Signer) -> None:
        """
        Args:
            app_id: The GitHub App id
            installation_id: Installation on the target organization or user
            signer: Holds the App's private key
        """
        self.app_id = str(app_id)
        self.installation_id = str(installation_id)
        self._signer = signer
        self._token: str | None = None
        self._expires_at: datetime | None = None

    def authorization(self, transport: "HTTPTransport") -> str:
        if self._needs_refresh():
            self._exchange(transport)
        return f"Bearer {self._token}"

    def _needs_refresh(self) -> bool:
        if self._token is None or self._expires_at is None:
            return True
        return datetime.now(timezone.utc) >= self._expires_at - REFRESH_MARGIN

    def _exchange(self, transport: "HTTPTransport") -> None:
        jwt = build_app_jwt(self.app_id, self._signer)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Exchanging app JWT for installation %s: jwt_exp=%s",
                self.installation_id,
                decode_jwt_claims(jwt)["exp"],
            )
        data = transport.request(
            "POST",
            f"/app/installations/{self.installation_id}/access_tokens",
            authorization=f"Bearer {jwt}",
        )

        try:
            token = data["token"]
            expires_at = datetime.fromisoformat(data["expires_at"].replace("Z", "+00:00"))
        except (KeyError, TypeError, ValueError) as e:
            raise AuthenticationError(
                "INVALID_TOKEN_RESPONSE",
                f"Malformed installation token response for installation {self.installation_id}",
            ) from e

        log_token_exchange(self.app_id, self.installation_id, data["expires_at"])
        self._token = token
        self._expires_at = expires_at
