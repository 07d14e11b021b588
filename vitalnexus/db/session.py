"""DB wiring for the doctor / user / article store (SQLAlchemy sessions)."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vitalnexus.config import settings
from vitalnexus.db.models import Base
from vitalnexus.utils import get_logger

logger = get_logger(__name__)


def _engine_kwargs(url: str) -> dict:
    kwargs: dict = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return kwargs


@lru_cache(maxsize=4)
def engine_for_url(url: str) -> Engine:
    return create_engine(url, **_engine_kwargs(url))


@lru_cache(maxsize=4)
def _sessionmaker_for_url(url: str):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine_for_url(url))


def init_db(url: Optional[str] = None) -> Engine:
    """Create any missing tables and return the engine."""
    engine = engine_for_url(url or settings.database_url)
    Base.metadata.create_all(engine)
    logger.info(f"Database ready ({engine.url.render_as_string(hide_password=True)})")
    return engine


def get_db() -> Iterator[Session]:
    """FastAPI dependency that yields a Session bound to the configured DB."""
    SessionLocal = _sessionmaker_for_url(settings.database_url)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = ["engine_for_url", "init_db", "get_db"]
