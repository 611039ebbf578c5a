from datetime import timedelta
from uuid import uuid4

import pytest

from app.backend.core.tokens import ACCESS, REFRESH, InvalidToken, TokenSigner


def test_access_token_round_trip_keeps_user_and_claims(signer):
    user_id = uuid4()
    claims = {"email": "a@example.com", "username": "alice", "full_name": "Alice"}

    token = signer.issue_access_token(user_id, claims)
    payload = signer.verify(token, ACCESS)

    assert payload["sub"] == str(user_id)
    for key, value in claims.items():
        assert payload[key] == value
    assert payload["typ"] == "access"


def test_access_token_ttl_comes_from_settings(signer):
    payload = signer.verify(signer.issue_access_token(uuid4()), ACCESS)

    assert payload["exp"] - payload["iat"] == 15 * 60


def test_refresh_token_carries_only_subject_and_nonce(signer):
    user_id = uuid4()

    payload = signer.verify(signer.issue_refresh_token(user_id), REFRESH)

    assert payload["sub"] == str(user_id)
    assert set(payload) == {"sub", "jti", "typ", "iat", "exp"}
    assert payload["exp"] - payload["iat"] == 10 * 24 * 60 * 60


def test_refresh_tokens_issued_back_to_back_differ(signer):
    user_id = uuid4()

    assert signer.issue_refresh_token(user_id) != signer.issue_refresh_token(user_id)


def test_expired_token_is_rejected(signer):
    token = signer.issue_access_token(uuid4(), expires_delta=timedelta(seconds=-30))

    with pytest.raises(InvalidToken):
        signer.verify(token, ACCESS)


def test_expired_refresh_token_is_rejected(signer):
    token = signer.issue_refresh_token(uuid4(), expires_delta=timedelta(seconds=-30))

    with pytest.raises(InvalidToken):
        signer.verify(token, REFRESH)


@pytest.mark.parametrize(("issued", "checked"), [(ACCESS, REFRESH), (REFRESH, ACCESS)])
def test_token_of_one_kind_never_verifies_as_the_other(signer, issued, checked):
    user_id = uuid4()
    token = (
        signer.issue_access_token(user_id) if issued == ACCESS else signer.issue_refresh_token(user_id)
    )

    with pytest.raises(InvalidToken):
        signer.verify(token, checked)


def test_tampered_token_is_rejected(signer):
    token = signer.issue_access_token(uuid4())
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidToken):
        signer.verify(tampered, ACCESS)


def test_token_signed_with_other_secret_is_rejected(signer):
    other = TokenSigner(
        access_secret="someone-else",
        refresh_secret="someone-else-refresh",
        access_ttl=timedelta(minutes=5),
        refresh_ttl=timedelta(days=1),
    )

    with pytest.raises(InvalidToken):
        signer.verify(other.issue_access_token(uuid4()), ACCESS)


def test_garbage_is_rejected(signer):
    with pytest.raises(InvalidToken):
        signer.verify("not-a-jwt", REFRESH)


def test_signer_refuses_shared_secret():
    with pytest.raises(ValueError, match="must differ"):
        TokenSigner(
            access_secret="same",
            refresh_secret="same",
            access_ttl=timedelta(minutes=5),
            refresh_ttl=timedelta(days=1),
        )


def test_unknown_kind_is_a_programming_error(signer):
    with pytest.raises(ValueError):
        signer.verify(signer.issue_access_token(uuid4()), "session")
