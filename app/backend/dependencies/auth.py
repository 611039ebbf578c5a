from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from app.backend.core.config import Settings, get_settings
from app.backend.core.security import PasswordHasher
from app.backend.core.tokens import ACCESS, ACCESS_COOKIE_NAME, InvalidToken, TokenSigner
from app.backend.models.user import UserAccount
from app.backend.services.auth_service import SessionManager
from app.backend.services.credential_store import CredentialStore
from app.db.session import get_session

oauth2_optional_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/users/login", auto_error=False
)


def get_token_signer(settings: Settings = Depends(get_settings)) -> TokenSigner:
    return TokenSigner.from_settings(settings)


def get_credential_store(db: Session = Depends(get_session)) -> CredentialStore:
    return CredentialStore(db)


def get_session_manager(
    store: CredentialStore = Depends(get_credential_store),
    signer: TokenSigner = Depends(get_token_signer),
    settings: Settings = Depends(get_settings),
) -> SessionManager:
    return SessionManager(store, PasswordHasher(settings.bcrypt_rounds), signer)


def _extract_jwt(request: Request, token: str | None) -> str | None:
    # 쿠키 우선, 없으면 Authorization: Bearer
    return request.cookies.get(ACCESS_COOKIE_NAME) or token


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    request: Request,
    token: str | None = Depends(oauth2_optional_scheme),
    signer: TokenSigner = Depends(get_token_signer),
    store: CredentialStore = Depends(get_credential_store),
) -> UserAccount:
    """Strict auth dependency; raises 401 when no/invalid token or the account is gone."""
    jwt_token = _extract_jwt(request, token)
    if not jwt_token:
        raise _unauthorized("Unauthorized request")

    try:
        payload = signer.verify(jwt_token, ACCESS)
    except InvalidToken:
        raise _unauthorized("Invalid Access Token")

    user = store.get(payload["sub"])
    if user is None:
        raise _unauthorized("Invalid Access Token")
    return user
