from typing import Optional
from uuid import UUID

from app.backend.core.errors import NotFoundError, ValidationError
from app.backend.models.user import UserAccount
from app.backend.schemas.user import UserRead
from app.backend.services.credential_store import CredentialStore


def _load(store: CredentialStore, user_id: UUID) -> UserAccount:
    account = store.get(user_id)
    if account is None:
        raise NotFoundError("User does not exist")
    return account


def get_current_user(store: CredentialStore, user_id: UUID) -> UserRead:
    return UserRead.model_validate(_load(store, user_id))


def update_account_details(store: CredentialStore, user_id: UUID, full_name: Optional[str]) -> UserRead:
    """표시 이름만 변경. username / email 은 로그인 식별자라 불변."""
    if not full_name or not full_name.strip():
        raise ValidationError("All fields are required")
    account = store.update_fields(_load(store, user_id), full_name=full_name.strip())
    return UserRead.model_validate(account)


def update_avatar(store: CredentialStore, user_id: UUID, avatar: Optional[str]) -> UserRead:
    if not avatar or not avatar.strip():
        raise ValidationError("Avatar file is missing")
    account = store.update_fields(_load(store, user_id), avatar=avatar.strip())
    return UserRead.model_validate(account)


def update_cover_image(store: CredentialStore, user_id: UUID, cover_image: Optional[str]) -> UserRead:
    if not cover_image or not cover_image.strip():
        raise ValidationError("Cover image file is missing")
    account = store.update_fields(_load(store, user_id), cover_image=cover_image.strip())
    return UserRead.model_validate(account)
