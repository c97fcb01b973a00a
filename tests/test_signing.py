"""
Property-based tests for GitHub App JWT generation.

Feature: github-app-auth
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from reviewbot.signers import RS256Signer
from reviewbot.signing import (
    CLOCK_SKEW,
    b64url_decode,
    b64url_encode,
    build_app_jwt,
    decode_jwt_claims,
)

app_id_strategy = st.integers(min_value=1, max_value=10**9).map(str)
issued_at_strategy = st.datetimes(
    min_value=datetime(2020, 1, 1),
    max_value=datetime(2035, 1, 1),
    timezones=st.just(timezone.utc),
)
ttl_strategy = st.integers(min_value=1, max_value=600).map(lambda s: timedelta(seconds=s))


@given(app_id=app_id_strategy, issued_at=issued_at_strategy, ttl=ttl_strategy)
@settings(max_examples=50)
def test_property_jwt_claims(
    rs256_signer: RS256Signer,
    app_id: str,
    issued_at: datetime,
    ttl: timedelta,
) -> None:
    """
    Property: app JWT claims

    For any app id, issue time and ttl up to ten minutes, the JWT SHALL carry
    iss=app_id, iat backdated by the clock skew and exp=issued_at+ttl.
    """
    token = build_app_jwt(app_id, rs256_signer, issued_at=issued_at, ttl=ttl)

    claims = decode_jwt_claims(token)
    assert claims == {
        "iss": app_id,
        "iat": int((issued_at - CLOCK_SKEW).timestamp()),
        "exp": int((issued_at + ttl).timestamp()),
    }


@given(app_id=app_id_strategy)
@settings(max_examples=25)
def test_property_jwt_signature_verifies(rs256_signer: RS256Signer, app_id: str) -> None:
    """
    Property: the JWT signature covers header and claims
    """
    token = build_app_jwt(app_id, rs256_signer)

    header_part, claims_part, signature_part = token.split(".")
    signing_input = f"{header_part}.{claims_part}".encode("ascii")

    assert rs256_signer.verify(b64url_decode(signature_part), signing_input)
    assert json.loads(b64url_decode(header_part)) == {"alg": "RS256", "typ": "JWT"}


def test_tampered_claims_fail_verification(rs256_signer: RS256Signer) -> None:
    token = build_app_jwt("12345", rs256_signer)
    header_part, _, signature_part = token.split(".")
    forged = b64url_encode(b'{"iss":"99999"}')

    assert not rs256_signer.verify(
        b64url_decode(signature_part),
        f"{header_part}.{forged}".encode("ascii"),
    )


def test_ttl_above_ten_minutes_is_rejected(rs256_signer: RS256Signer) -> None:
    with pytest.raises(ValueError, match="at most"):
        build_app_jwt("12345", rs256_signer, ttl=timedelta(minutes=11))


def test_jwt_parts_are_unpadded(rs256_signer: RS256Signer) -> None:
    token = build_app_jwt("12345", rs256_signer)

    assert "=" not in token
    assert token.count(".") == 2
