from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[1]


def _alembic_config(connection) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.attributes["connection"] = connection
    return cfg


def test_upgrade_and_downgrade_on_sqlite(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'migrate.db'}")

    with engine.begin() as conn:
        command.upgrade(_alembic_config(conn), "head")

    insp = inspect(engine)
    assert {"useraccount", "tweet"} <= set(insp.get_table_names())
    assert {ix["name"] for ix in insp.get_indexes("tweet")} == {"ix_tweet_owner_id"}
    assert [fk["referred_table"] for fk in insp.get_foreign_keys("tweet")] == ["useraccount"]

    with engine.begin() as conn:
        command.downgrade(_alembic_config(conn), "base")

    assert "useraccount" not in inspect(engine).get_table_names()
    engine.dispose()
