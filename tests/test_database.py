# tests/test_database.py
import logging

from sqlalchemy.pool import StaticPool

from ticket_system.core.database import _engine_options


def test_in_memory_sqlite_shares_one_connection_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="ticket_system.core.database"):
        options = _engine_options("sqlite://")
    assert options["poolclass"] is StaticPool
    assert "tests only" in caplog.text


def test_file_sqlite_uses_default_pool(caplog):
    with caplog.at_level(logging.WARNING, logger="ticket_system.core.database"):
        options = _engine_options("sqlite:///./tickets.db")
    assert "poolclass" not in options
    assert options["connect_args"] == {"check_same_thread": False}
    assert caplog.text == ""


def test_postgres_pings_pooled_connections():
    assert _engine_options("postgresql+psycopg://u:p@db/tickets") == {"pool_pre_ping": True}
