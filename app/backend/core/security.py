from __future__ import annotations

import bcrypt

from app.backend.core.errors import InternalError

# bcrypt 는 72 byte 이후를 무시(신버전은 ValueError)하므로 호출 전에 막는다
BCRYPT_MAX_BYTES = 72


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > BCRYPT_MAX_BYTES


class PasswordHasher:
    """bcrypt 기반 단방향 해시. cost factor 는 생성 시 고정."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        try:
            hashed = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))
        except ValueError as exc:
            raise InternalError("Password hashing failed") from exc
        return hashed.decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not plaintext or password_too_long(plaintext):
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError as exc:
            # 저장된 해시 자체가 깨진 경우 → 사용자 입력 문제가 아님
            raise InternalError("Password verification failed") from exc
