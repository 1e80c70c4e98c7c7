"""Tests for TokenIssuer and TokenValidator (HS256, issuer/audience/expiry checks)."""

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from sweem.domain.enums import Role
from sweem.domain.exceptions import InvalidTokenException
from sweem.infrastructure.security import TokenIssuer, TokenValidator

KEY = "unit-test-signing-key-0123456789abcdef"
ISSUER = "sweem"
AUDIENCE = "sweem-clients"


def _issuer(**overrides) -> TokenIssuer:
    kwargs = {"signing_key": KEY, "issuer": ISSUER, "audience": AUDIENCE}
    kwargs.update(overrides)
    return TokenIssuer(**kwargs)


def _validator(**overrides) -> TokenValidator:
    kwargs = {"signing_key": KEY, "issuer": ISSUER, "audience": AUDIENCE}
    kwargs.update(overrides)
    return TokenValidator(**kwargs)


def test_round_trip_returns_subject_and_role() -> None:
    user_id = uuid.uuid4()
    claims = _validator().validate(_issuer().issue(user_id, Role.MANAGER))
    assert claims.subject_id == user_id
    assert claims.role is Role.MANAGER


def test_token_is_compact_jws() -> None:
    token = _issuer().issue(uuid.uuid4(), Role.MEMBER)
    assert token.count(".") == 2


def test_tokens_issued_at_different_times_differ() -> None:
    user_id = uuid.uuid4()
    t0 = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    first = _issuer(clock=lambda: t0).issue(user_id, Role.ADMIN)
    second = _issuer(clock=lambda: t0 + timedelta(seconds=1)).issue(user_id, Role.ADMIN)
    assert first != second


@pytest.mark.parametrize(
    "validator",
    [
        _validator(issuer="someone-else"),
        _validator(audience="other-audience"),
        _validator(signing_key="a-different-signing-key-0123456789abcdef"),
    ],
    ids=["wrong-issuer", "wrong-audience", "wrong-key"],
)
def test_mismatched_validator_rejects(validator: TokenValidator) -> None:
    token = _issuer().issue(uuid.uuid4(), Role.MEMBER)
    with pytest.raises(InvalidTokenException):
        validator.validate(token)


def test_expired_token_rejected() -> None:
    token = _issuer(lifetime=timedelta(seconds=-1)).issue(uuid.uuid4(), Role.MEMBER)
    with pytest.raises(InvalidTokenException):
        _validator().validate(token)


def test_token_from_the_past_rejected() -> None:
    long_ago = datetime(2020, 1, 1, tzinfo=UTC)
    token = _issuer(clock=lambda: long_ago).issue(uuid.uuid4(), Role.MEMBER)
    with pytest.raises(InvalidTokenException):
        _validator().validate(token)


def test_tampered_token_rejected() -> None:
    token = _issuer().issue(uuid.uuid4(), Role.MEMBER)
    header, payload, signature = token.split(".")
    flipped = "A" if signature[0] != "A" else "B"
    with pytest.raises(InvalidTokenException):
        _validator().validate(f"{header}.{payload}.{flipped}{signature[1:]}")


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_rejected(token: str) -> None:
    with pytest.raises(InvalidTokenException):
        _validator().validate(token)


def test_failures_share_one_message() -> None:
    messages = set()
    for bad in (_validator(issuer="x"), _validator(audience="x")):
        with pytest.raises(InvalidTokenException) as exc_info:
            bad.validate(_issuer().issue(uuid.uuid4(), Role.MEMBER))
        messages.add(exc_info.value.message)
    assert messages == {"Invalid or expired token"}
