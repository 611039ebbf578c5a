from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, JSON
from uuid import UUID, uuid4
from datetime import datetime, timezone
from typing import List, Optional


def utcnow() -> datetime:
    """timezone-aware UTC. naive datetime 은 컬럼에 쓰지 않는다."""
    return datetime.now(tz=timezone.utc)


def timestamp_column() -> Column:
    return Column(DateTime(timezone=True), nullable=False)


class UserAccount(SQLModel, table=True):
    """
    계정 1건 = 세션 1건.
    - refresh_token: 현재 유효한 유일한 RT (로그아웃 상태면 NULL)
    - password_hash: bcrypt 해시, 비밀번호 변경 경로에서만 갱신
    """
    __tablename__ = "useraccount"

    user_id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(index=True, unique=True)
    email: str = Field(index=True, unique=True)
    full_name: str = Field(index=True)
    avatar: str
    cover_image: str = ""
    watch_history: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    password_hash: str
    refresh_token: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
    updated_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
