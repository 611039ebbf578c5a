import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import app.db.base  # noqa: F401,E402
from app.backend.core.config import Settings, get_settings  # noqa: E402
from app.backend.core.security import PasswordHasher  # noqa: E402
from app.backend.core.tokens import TokenSigner  # noqa: E402
from app.backend.main import app as asgi_app  # noqa: E402
from app.backend.services.auth_service import SessionManager  # noqa: E402
from app.backend.services.credential_store import CredentialStore  # noqa: E402
from app.db.session import get_session  # noqa: E402

PASSWORD = "correct horse battery"


@pytest.fixture
def settings():
    # bcrypt 최소 cost(4)로 테스트 속도 확보, http TestClient 라 secure 쿠키 끔
    return Settings(
        ACCESS_TOKEN_SECRET="test-access-secret",
        REFRESH_TOKEN_SECRET="test-refresh-secret",
        BCRYPT_ROUNDS=4,
        COOKIE_SECURE=False,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def signer(settings):
    return TokenSigner.from_settings(settings)


@pytest.fixture
def hasher(settings):
    return PasswordHasher(settings.bcrypt_rounds)


@pytest.fixture
def store(db):
    return CredentialStore(db)


@pytest.fixture
def manager(store, hasher, signer):
    return SessionManager(store, hasher, signer)


@pytest.fixture
def alice(manager):
    return manager.register(
        username="Alice",
        email="Alice@Example.com",
        full_name="Alice Liddell",
        password=PASSWORD,
        avatar="https://cdn.example.com/avatars/alice.png",
    )


@pytest.fixture
def client(engine, settings):
    def _session_override():
        with Session(engine) as s:
            yield s

    asgi_app.dependency_overrides[get_session] = _session_override
    asgi_app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(asgi_app) as c:
        yield c
    asgi_app.dependency_overrides.clear()
