# app/backend/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # 기본 앱 설정 (환경 스위치는 APP_ENV 하나)
    app_env: Literal["dev", "prod", "test"] = Field("dev", alias="APP_ENV")

    # JWT: access / refresh 는 서로 다른 secret 과 TTL 을 쓴다
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_secret: str = Field("dev_access_secret_change_me", alias="ACCESS_TOKEN_SECRET")
    access_token_expire_minutes: int = Field(15, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    refresh_token_secret: str = Field("dev_refresh_secret_change_me", alias="REFRESH_TOKEN_SECRET")
    refresh_token_expire_days: int = Field(10, alias="REFRESH_TOKEN_EXPIRE_DAYS")

    # 비밀번호 해시 cost factor
    bcrypt_rounds: int = Field(10, alias="BCRYPT_ROUNDS")

    # 쿠키 (개발에서 http라면 COOKIE_SECURE=false)
    cookie_secure: bool = Field(True, alias="COOKIE_SECURE")

    cors_allow_origins: str = Field("http://localhost:3000,http://localhost:5173", alias="CORS_ALLOW_ORIGINS")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """FastAPI Depends(get_settings) 용. 테스트에서는 dependency_overrides 로 교체."""
    return Settings()
