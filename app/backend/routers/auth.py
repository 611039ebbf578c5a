from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status

from app.backend.core.config import Settings, get_settings
from app.backend.core.tokens import REFRESH_COOKIE_NAME, clear_auth_cookies, set_auth_cookies
from app.backend.dependencies.auth import get_current_user, get_session_manager
from app.backend.models.user import UserAccount
from app.backend.schemas.user import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResult,
    MessageResponse,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
    UserRead,
)
from app.backend.services.auth_service import SessionManager

# 핸들러는 일반 def → FastAPI threadpool 에서 실행되므로 bcrypt 가 이벤트 루프를 막지 않는다
auth_router = APIRouter(prefix="/api/v1/users", tags=["auth"])


@auth_router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    manager: SessionManager = Depends(get_session_manager),
):
    return manager.register(
        username=body.username,
        email=body.email,
        full_name=body.full_name,
        password=body.password,
        avatar=body.avatar,
        cover_image=body.cover_image,
    )


@auth_router.post("/login", response_model=LoginResult)
def login(
    body: LoginRequest,
    response: Response,
    manager: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
):
    result = manager.login(password=body.password, username=body.username, email=body.email)
    set_auth_cookies(response, result.access_token, result.refresh_token, secure=settings.cookie_secure)
    return result


@auth_router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    current_user: UserAccount = Depends(get_current_user),
    manager: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
):
    manager.logout(current_user.user_id)
    clear_auth_cookies(response, secure=settings.cookie_secure)
    return MessageResponse(message="User logged Out")


@auth_router.post("/refresh-token", response_model=TokenPair)
def refresh_access_token(
    request: Request,
    response: Response,
    body: Optional[RefreshRequest] = None,
    manager: SessionManager = Depends(get_session_manager),
    settings: Settings = Depends(get_settings),
):
    """
    Refresh token rotation.
    - RT 는 쿠키 우선, 없으면 JSON body 의 refresh_token
    - 성공 시 새 AT/RT 쌍 발급, 이전 RT 는 즉시 무효
    """
    incoming = request.cookies.get(REFRESH_COOKIE_NAME) or (body.refresh_token if body else None)
    pair = manager.refresh(incoming)
    set_auth_cookies(response, pair.access_token, pair.refresh_token, secure=settings.cookie_secure)
    return pair


@auth_router.post("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    current_user: UserAccount = Depends(get_current_user),
    manager: SessionManager = Depends(get_session_manager),
):
    manager.change_password(current_user.user_id, body.old_password, body.new_password)
    return MessageResponse(message="Password changed successfully")
