from uuid import uuid4

import pytest
from sqlmodel import select

from app.backend.core.errors import ConflictError
from app.backend.models.user import UserAccount


def _account(**overrides):
    fields = dict(
        username="bob",
        email="bob@example.com",
        full_name="Bob",
        avatar="https://cdn.example.com/bob.png",
        password_hash="$2b$04$placeholderplaceholderplaceholderplaceholderplacehol",
    )
    fields.update(overrides)
    return UserAccount(**fields)


@pytest.fixture
def bob(store):
    return store.create(_account())


@pytest.mark.parametrize(
    ("username", "email"),
    [
        ("bob", None),
        (None, "bob@example.com"),
        ("  BOB ", None),
        (None, "Bob@Example.COM"),
        ("bob", "someone-else@example.com"),
        ("someone-else", "bob@example.com"),
    ],
)
def test_find_by_identity_matches_either_field(store, bob, username, email):
    found = store.find_by_identity(username=username, email=email)

    assert found is not None
    assert found.user_id == bob.user_id


def test_find_by_identity_without_any_key_returns_none(store, bob):
    assert store.find_by_identity() is None
    assert store.find_by_identity(username="  ", email="") is None


def test_find_by_identity_unknown(store, bob):
    assert store.find_by_identity(username="carol", email="carol@example.com") is None


def test_get_tolerates_malformed_ids(store, bob):
    assert store.get(str(bob.user_id)).user_id == bob.user_id
    assert store.get("not-a-uuid") is None
    assert store.get(uuid4()) is None


def test_create_duplicate_username_is_a_conflict(store, db, bob):
    with pytest.raises(ConflictError):
        store.create(_account(email="other@example.com"))

    assert len(db.exec(select(UserAccount)).all()) == 1


def test_set_and_clear_refresh_token(store, bob):
    store.set_refresh_token(bob.user_id, "token-1")
    assert store.get(bob.user_id).refresh_token == "token-1"

    store.set_refresh_token(bob.user_id, None)
    assert store.get(bob.user_id).refresh_token is None


def test_swap_only_replaces_the_expected_token(store, bob):
    store.set_refresh_token(bob.user_id, "token-1")

    assert store.swap_refresh_token(bob.user_id, "token-1", "token-2") is True
    assert store.swap_refresh_token(bob.user_id, "token-1", "token-3") is False
    assert store.get(bob.user_id).refresh_token == "token-2"


def test_swap_never_matches_a_cleared_slot(store, bob):
    store.set_refresh_token(bob.user_id, None)

    assert store.swap_refresh_token(bob.user_id, "", "token-1") is False
    assert store.get(bob.user_id).refresh_token is None


def test_update_fields_touches_only_named_fields(store, bob):
    store.set_refresh_token(bob.user_id, "token-1")
    before = store.get(bob.user_id).updated_at

    updated = store.update_fields(store.get(bob.user_id), full_name="Robert")

    assert updated.full_name == "Robert"
    assert updated.refresh_token == "token-1"
    assert updated.updated_at >= before


@pytest.mark.parametrize("column", ["created_at", "updated_at"])
def test_timestamp_columns_are_timezone_aware(column):
    assert UserAccount.__table__.c[column].type.timezone is True


def test_new_account_timestamps_carry_utc_offset():
    account = _account()

    assert account.created_at.tzinfo is not None
    assert account.updated_at.utcoffset().total_seconds() == 0


def test_token_writes_persist_with_aware_timestamps(store, bob):
    store.set_refresh_token(bob.user_id, "token-1")
    assert store.swap_refresh_token(bob.user_id, "token-1", "token-2") is True

    assert store.get(bob.user_id).refresh_token == "token-2"
