from __future__ import annotations

import hmac
from typing import Optional
from uuid import UUID

from app.backend.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.backend.core.security import PasswordHasher, password_too_long
from app.backend.core.tokens import REFRESH, InvalidToken, TokenSigner
from app.backend.models.user import UserAccount
from app.backend.schemas.user import LoginResult, TokenPair, UserRead
from app.backend.services.credential_store import CredentialStore, normalize_identity


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _check_password_length(password: str) -> None:
    if password_too_long(password):
        raise ValidationError("Password must be at most 72 bytes")


class SessionManager:
    """
    register / login / refresh / logout / change_password.
    세션 상태는 UserAccount.refresh_token 하나로 표현된다.
    - NULL  → 로그아웃
    - 값     → 마지막으로 발급된 RT 만 유효 (새 로그인은 이전 세션을 덮어씀)
    실패 경로에서는 어떤 필드도 건드리지 않는다.
    """

    def __init__(self, store: CredentialStore, hasher: PasswordHasher, signer: TokenSigner) -> None:
        self.store = store
        self.hasher = hasher
        self.signer = signer

    # ──────────────────────────────────────────────
    # 내부 헬퍼
    # ──────────────────────────────────────────────
    def _issue_pair(self, account: UserAccount) -> TokenPair:
        access = self.signer.issue_access_token(
            account.user_id,
            {"email": account.email, "username": account.username, "full_name": account.full_name},
        )
        refresh = self.signer.issue_refresh_token(account.user_id)
        return TokenPair(access_token=access, refresh_token=refresh)

    # ──────────────────────────────────────────────
    # operations
    # ──────────────────────────────────────────────
    def register(
        self,
        *,
        username: Optional[str],
        email: Optional[str],
        full_name: Optional[str],
        password: Optional[str],
        avatar: Optional[str],
        cover_image: Optional[str] = None,
    ) -> UserRead:
        if any(_blank(v) for v in (username, email, full_name, password)):
            raise ValidationError("All fields are required")

        if self.store.find_by_identity(username=username, email=email) is not None:
            raise ConflictError("User with email or username already exists")

        if _blank(avatar):
            raise ValidationError("Avatar file is required")
        _check_password_length(password)

        account = UserAccount(
            username=normalize_identity(username),
            email=normalize_identity(email),
            full_name=full_name.strip(),
            avatar=avatar.strip(),
            cover_image=(cover_image or "").strip(),
            password_hash=self.hasher.hash(password),
            refresh_token=None,
        )
        created = self.store.create(account)
        return UserRead.model_validate(created)

    def login(self, *, password: Optional[str], username: Optional[str] = None, email: Optional[str] = None) -> LoginResult:
        if _blank(username) and _blank(email):
            raise ValidationError("username or email is required")

        account = self.store.find_by_identity(username=username, email=email)
        if account is None:
            raise NotFoundError("User does not exist")

        if not self.hasher.verify(password or "", account.password_hash):
            raise AuthError("Invalid user credentials")

        pair = self._issue_pair(account)
        self.store.set_refresh_token(account.user_id, pair.refresh_token)
        account = self.store.get(account.user_id)
        return LoginResult(user=UserRead.model_validate(account), **pair.model_dump())

    def refresh(self, presented: Optional[str]) -> TokenPair:
        if _blank(presented):
            raise AuthError("Unauthorized request")

        try:
            claims = self.signer.verify(presented, REFRESH)
        except InvalidToken:
            raise AuthError("Invalid refresh token")

        account = self.store.get(claims["sub"])
        if account is None:
            raise AuthError("Invalid refresh token")

        current = account.refresh_token
        if current is None or not hmac.compare_digest(presented.encode("utf-8"), current.encode("utf-8")):
            raise AuthError("Refresh token is expired or used")

        pair = self._issue_pair(account)
        # 비교와 교체를 한 번의 조건부 UPDATE 로 → 동시 refresh 중 하나만 통과
        if not self.store.swap_refresh_token(account.user_id, presented, pair.refresh_token):
            raise AuthError("Refresh token is expired or used")
        return pair

    def logout(self, user_id: UUID) -> None:
        # 상위에서 access token 으로 이미 신원 확인됨 → 여기선 재검증하지 않는다
        self.store.set_refresh_token(user_id, None)

    def change_password(self, user_id: UUID, old_password: Optional[str], new_password: Optional[str]) -> None:
        account = self.store.get(user_id)
        if account is None:
            raise NotFoundError("User does not exist")

        if not self.hasher.verify(old_password or "", account.password_hash):
            raise ValidationError("Invalid password")

        if _blank(new_password):
            raise ValidationError("New password is required")
        _check_password_length(new_password)

        # 해시는 여기서 명시적으로 한 번만. refresh_token 은 그대로 둔다.
        self.store.update_fields(account, password_hash=self.hasher.hash(new_password))
