from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from uuid import UUID, uuid4

from jose import JWTError, jwt

# ← python-jose 사용
from app.backend.core.config import Settings

ACCESS = "access"
REFRESH = "refresh"

ACCESS_COOKIE_NAME = "accessToken"
REFRESH_COOKIE_NAME = "refreshToken"


class InvalidToken(Exception):
    """서명 불일치 · 만료 · typ 오류 · 필수 claim 누락."""


# ---- 공통 ----
def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class TokenSigner:
    """
    Access / Refresh 토큰 발급 및 검증.
    - access: 짧은 TTL, sub + 식별 claim (email, username, full_name)
    - refresh: 긴 TTL, sub + jti 만 (서버에 저장되는 유일한 세션 자격)
    두 종류는 서로 다른 secret 으로 서명된다.
    """

    def __init__(
        self,
        *,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
        algorithm: str = "HS256",
    ) -> None:
        if not access_secret or not refresh_secret:
            raise ValueError("token secrets must be non-empty")
        if access_secret == refresh_secret:
            raise ValueError("access and refresh secrets must differ")
        self._secrets = {ACCESS: access_secret, REFRESH: refresh_secret}
        self._ttls = {ACCESS: access_ttl, REFRESH: refresh_ttl}
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenSigner":
        return cls(
            access_secret=settings.access_token_secret,
            refresh_secret=settings.refresh_token_secret,
            access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
            algorithm=settings.jwt_algorithm,
        )

    @property
    def access_ttl(self) -> timedelta:
        return self._ttls[ACCESS]

    @property
    def refresh_ttl(self) -> timedelta:
        return self._ttls[REFRESH]

    def _make_jwt(self, payload: Dict[str, Any], kind: str, expires_delta: timedelta | None) -> str:
        now = _utcnow()
        exp = now + (expires_delta if expires_delta is not None else self._ttls[kind])
        to_encode = payload.copy()
        to_encode["typ"] = kind
        to_encode["iat"] = int(now.timestamp())
        to_encode["exp"] = int(exp.timestamp())
        return jwt.encode(to_encode, self._secrets[kind], algorithm=self.algorithm)

    # ---- Access Token ----
    def issue_access_token(
        self,
        user_id: UUID | str,
        claims: Dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        payload: Dict[str, Any] = dict(claims or {})
        payload["sub"] = str(user_id)
        return self._make_jwt(payload, ACCESS, expires_delta)

    # ---- Refresh Token ----
    def issue_refresh_token(self, user_id: UUID | str, expires_delta: timedelta | None = None) -> str:
        # jti 는 같은 초에 발급된 두 토큰이 같은 문자열이 되지 않게 하는 nonce
        payload = {"sub": str(user_id), "jti": uuid4().hex}
        return self._make_jwt(payload, REFRESH, expires_delta)

    def verify(self, token: str, kind: str) -> Dict[str, Any]:
        """
        유효한 토큰이면 payload(dict)를 반환,
        서명 불일치·만료·type 오류가 나면 InvalidToken 을 던진다.
        """
        if kind not in self._secrets:
            raise ValueError(f"unknown token kind: {kind!r}")
        try:
            # jose.jwt.decode는 검증 실패 시 JWTError(만료 포함)를 던짐
            payload = jwt.decode(token, self._secrets[kind], algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc
        if payload.get("typ") != kind:
            raise InvalidToken("Invalid token type")
        if not payload.get("sub"):
            raise InvalidToken("Missing sub")
        return payload


# ---- 쿠키 ----
def set_auth_cookies(response, access_token: str, refresh_token: str, *, secure: bool) -> None:
    # HttpOnly: 프론트 JS 에서 접근 불가, 서버만 수정
    for key, value in ((ACCESS_COOKIE_NAME, access_token), (REFRESH_COOKIE_NAME, refresh_token)):
        response.set_cookie(
            key=key,
            value=value,
            httponly=True,
            secure=secure,
            path="/",
        )


def clear_auth_cookies(response, *, secure: bool) -> None:
    for key in (ACCESS_COOKIE_NAME, REFRESH_COOKIE_NAME):
        response.delete_cookie(key=key, path="/", httponly=True, secure=secure)
