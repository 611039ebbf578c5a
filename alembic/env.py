import logging
import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import app.db.base  # noqa: F401,E402  모델 import → metadata 채움
from app.db.session import _build_db_url, _mask  # noqa: E402

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

log = logging.getLogger("alembic.env")
target_metadata = SQLModel.metadata


def _db_url() -> str:
    # alembic.ini 에 URL 을 두지 않는다. DATABASE_URL 정규화 규칙은 런타임과 동일
    url = _build_db_url()
    log.info("migrating %s", _mask(url))
    return url


def _configure(backend: str, **kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # sqlite 는 ALTER 가 제한적이라 batch 모드로 렌더링
        render_as_batch=backend == "sqlite",
        **kwargs,
    )


def run_migrations_offline() -> None:
    url = _db_url()
    _configure(make_url(url).get_backend_name(), url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # 테스트 등에서 이미 열린 connection 을 넘기면 그대로 사용
    connection = config.attributes.get("connection")
    if connection is not None:
        _configure(connection.dialect.name, connection=connection)
        with context.begin_transaction():
            context.run_migrations()
        return

    engine = create_engine(_db_url(), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            _configure(connection.dialect.name, connection=connection)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
