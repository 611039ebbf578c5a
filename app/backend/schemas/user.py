from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# 요청 필드는 모두 Optional: 빈 값/누락 판단은 서비스 계층(ValidationError → 400)이 한다
class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    password: Optional[str] = None
    avatar: Optional[str] = None        # 외부 스토리지에 이미 올라간 URL
    cover_image: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class RefreshRequest(BaseModel):
    refresh_token: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    old_password: Optional[str] = None
    new_password: Optional[str] = None


class UpdateAccountRequest(BaseModel):
    full_name: Optional[str] = None


class AvatarUpdateRequest(BaseModel):
    avatar: Optional[str] = None


class CoverImageUpdateRequest(BaseModel):
    cover_image: Optional[str] = None


class UserRead(BaseModel):
    """password_hash / refresh_token 이 빠진 계정 뷰."""
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    username: str
    email: str
    full_name: str
    avatar: str
    cover_image: str = ""
    watch_history: List[str] = []
    created_at: datetime
    updated_at: datetime


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LoginResult(TokenPair):
    user: UserRead


class MessageResponse(BaseModel):
    message: str
