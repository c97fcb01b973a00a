"""
GitHub App JWT generation.

Implements the signing flow: claims -> compact JSON -> base64url -> sign -> encode.
"""

import base64
import json
from datetime import datetime, timedelta, timezone
from typing import Any

from reviewbot.signers import Signer

# GitHub rejects app JWTs that live longer than ten minutes
MAX_JWT_TTL = timedelta(minutes=10)

# Backdating tolerates clock drift between us and GitHub
CLOCK_SKEW = timedelta(seconds=60)


def b64url_encode(data: bytes) -> str:
    """Base64url-encode without padding, as JWTs require."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str) -> bytes:
    """Decode unpadded base64url."""
    return base64.urlsafe_b64decode(data + "=" * (-len(data) % 4))


def _compact_json(value: dict[str, Any]) -> bytes:
    return json.dumps(value, separators=(",", ":"), sort_keys=True).encode("utf-8")


def build_app_jwt(
    app_id: str,
    signer: Signer,
    issued_at: datetime | None = None,
    ttl: timedelta = timedelta(minutes=9),
) -> str:
    """
    Build a JWT that authenticates as a GitHub App.

    The signing process:
    1. Build header and claims (iat backdated by 60 seconds, exp, iss)
    2. Serialize each as compact JSON
    3. Base64url-encode and join with "."
    4. Sign the joined bytes with the provided signer
    5. Append the base64url signature

    Args:
        app_id: The GitHub App id (used as the issuer)
        signer: A Signer holding the app's private key
        issued_at: Token creation time (default: now)
        ttl: Lifetime measured from issued_at, at most 10 minutes

    Returns:
        Encoded JWT string

    Raises:
        ValueError: If ttl exceeds what GitHub accepts
    """
    if ttl > MAX_JWT_TTL:
        raise ValueError(f"GitHub App JWTs may live at most {MAX_JWT_TTL}, got {ttl}")

    now = issued_at or datetime.now(timezone.utc)
    header = {"alg": signer.algorithm, "typ": "JWT"}
    claims = {
        "iat": int((now - CLOCK_SKEW).timestamp()),
        "exp": int((now + ttl).timestamp()),
        "iss": str(app_id),
    }

    signing_input = f"{b64url_encode(_compact_json(header))}.{b64url_encode(_compact_json(claims))}"
    signature = signer.sign(signing_input.encode("ascii"))
    return f"{signing_input}.{b64url_encode(signature)}"


def decode_jwt_claims(token: str) -> dict[str, Any]:
    """
    Decode the claims of a JWT without verifying it.

    Useful for debugging and verification.

    Args:
        token: Encoded JWT

    Returns:
        The claims dictionary
    """
    _, payload, _ = token.split(".")
    return json.loads(b64url_decode(payload))
