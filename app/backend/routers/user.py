from fastapi import APIRouter, Depends

from app.backend.dependencies.auth import get_credential_store, get_current_user
from app.backend.models.user import UserAccount
from app.backend.schemas.user import (
    AvatarUpdateRequest,
    CoverImageUpdateRequest,
    UpdateAccountRequest,
    UserRead,
)
from app.backend.services import user_service
from app.backend.services.credential_store import CredentialStore


user_router = APIRouter(prefix="/api/v1/users", tags=["users"])


@user_router.get("/current-user", response_model=UserRead)
def get_current_user_view(
    current_user: UserAccount = Depends(get_current_user),
    store: CredentialStore = Depends(get_credential_store),
):
    return user_service.get_current_user(store, current_user.user_id)


@user_router.patch("/update-account", response_model=UserRead)
def update_account(
    body: UpdateAccountRequest,
    current_user: UserAccount = Depends(get_current_user),
    store: CredentialStore = Depends(get_credential_store),
):
    return user_service.update_account_details(store, current_user.user_id, body.full_name)


@user_router.patch("/avatar", response_model=UserRead)
def update_avatar(
    body: AvatarUpdateRequest,
    current_user: UserAccount = Depends(get_current_user),
    store: CredentialStore = Depends(get_credential_store),
):
    return user_service.update_avatar(store, current_user.user_id, body.avatar)


@user_router.patch("/cover-image", response_model=UserRead)
def update_cover_image(
    body: CoverImageUpdateRequest,
    current_user: UserAccount = Depends(get_current_user),
    store: CredentialStore = Depends(get_credential_store),
):
    return user_service.update_cover_image(store, current_user.user_id, body.cover_image)
