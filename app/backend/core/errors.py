from __future__ import annotations


class AppError(Exception):
    """
    서비스 계층 공통 예외. HTTP 매핑은 main.py 의 exception handler 가 담당한다.
    """

    status_code: int = 500

    def __init__(self, message: str = "Something went wrong") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed caller input (400)."""
    status_code = 400


class AuthError(AppError):
    """Credential or token rejected (401)."""
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Uniqueness violation (409)."""
    status_code = 409


class InternalError(AppError):
    """Store / hashing / signing failure (500)."""
    status_code = 500
