# ticket_system/core/database.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from ticket_system.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    options: dict = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every checkout gets an empty database
        options["poolclass"] = StaticPool
        logger.warning(
            "In-memory SQLite shares one connection across all requests; "
            "concurrent requests share its transaction. Use it for tests only."
        )
    return options


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db() -> None:
    # models must be imported so their tables are registered on Base.metadata
    from ticket_system.ticket import models as ticket_models  # noqa: F401
    from ticket_system.user import models as user_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready (%s)", engine.url.get_backend_name())


# Common DB dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
