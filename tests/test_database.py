import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from torqr import database
from torqr.database import build_engine, enable_slow_query_logging


def test_sqlite_connections_enforce_foreign_keys(engine):
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_build_engine_for_sqlite_skips_pool_options():
    sqlite_engine = build_engine("sqlite://")
    assert sqlite_engine.dialect.name == "sqlite"
    sqlite_engine.dispose()


def test_slow_query_logging_is_scoped_to_one_engine(monkeypatch, caplog):
    monkeypatch.setattr(database, "SLOW_QUERY_THRESHOLD", -1.0)
    logged = create_engine("sqlite://", poolclass=StaticPool)
    silent = create_engine("sqlite://", poolclass=StaticPool)

    enable_slow_query_logging(logged)

    assert event.contains(logged, "before_cursor_execute", database._before_cursor_execute)
    assert not event.contains(silent, "before_cursor_execute", database._before_cursor_execute)
    assert not event.contains(Engine, "before_cursor_execute", database._before_cursor_execute)

    with caplog.at_level(logging.WARNING, logger="torqr.database"):
        with silent.connect() as conn:
            conn.execute(text("SELECT 1"))
        assert "Slow query" not in caplog.text

        with logged.connect() as conn:
            conn.execute(text("SELECT 2"))
        assert "Slow query" in caplog.text

    logged.dispose()
    silent.dispose()
