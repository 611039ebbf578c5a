from __future__ import annotations

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.backend.core.errors import ConflictError, InternalError
from app.backend.models.user import UserAccount, utcnow


def normalize_identity(value: Optional[str]) -> str:
    return (value or "").strip().lower()


class CredentialStore:
    """
    UserAccount 테이블 접근. 모든 쓰기는 즉시 commit 되고,
    DB 오류는 rollback 후 InternalError 로 바뀐다.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("User with email or username already exists") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise InternalError("Credential store write failed") from exc

    def get(self, user_id: UUID | str) -> Optional[UserAccount]:
        if not isinstance(user_id, UUID):
            try:
                user_id = UUID(str(user_id))
            except ValueError:
                return None
        try:
            return self.db.get(UserAccount, user_id)
        except SQLAlchemyError as exc:
            raise InternalError("Credential store read failed") from exc

    def find_by_identity(self, *, username: Optional[str] = None, email: Optional[str] = None) -> Optional[UserAccount]:
        """username OR email 어느 한쪽만 맞아도 찾는다."""
        conds = []
        if normalize_identity(username):
            conds.append(UserAccount.username == normalize_identity(username))
        if normalize_identity(email):
            conds.append(UserAccount.email == normalize_identity(email))
        if not conds:
            return None
        try:
            return self.db.exec(select(UserAccount).where(or_(*conds))).first()
        except SQLAlchemyError as exc:
            raise InternalError("Credential store read failed") from exc

    def create(self, account: UserAccount) -> UserAccount:
        self.db.add(account)
        self._commit()
        self.db.refresh(account)
        return account

    def update_fields(self, account: UserAccount, **fields: Any) -> UserAccount:
        for key, value in fields.items():
            setattr(account, key, value)
        account.updated_at = utcnow()
        self.db.add(account)
        self._commit()
        self.db.refresh(account)
        return account

    # ---- refresh token (세션) ----
    def set_refresh_token(self, user_id: UUID, token: Optional[str]) -> None:
        """무조건 덮어쓰기 (login) / NULL 로 비우기 (logout)."""
        self._execute_update(update(UserAccount).where(UserAccount.user_id == user_id), token)

    def swap_refresh_token(self, user_id: UUID, expected: str, new: str) -> bool:
        """
        저장된 RT 가 expected 일 때만 new 로 교체하는 조건부 UPDATE.
        두 요청이 같은 RT 로 동시에 refresh 하면 하나만 성공한다.
        """
        stmt = update(UserAccount).where(
            UserAccount.user_id == user_id,
            UserAccount.refresh_token == expected,
        )
        return self._execute_update(stmt, new) == 1

    def _execute_update(self, stmt, token: Optional[str]) -> int:
        stmt = stmt.values(refresh_token=token, updated_at=utcnow())
        try:
            result = self.db.execute(stmt)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise InternalError("Credential store write failed") from exc
        self._commit()
        return result.rowcount
