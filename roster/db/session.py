"""Engine/session helpers for the SQL storage backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from roster.core.config import get_settings

Base = declarative_base()


def _resolve_url(url: str | None) -> str:
    resolved = (url or get_settings().database_url or "").strip()
    if not resolved:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return resolved


@lru_cache
def _engine_for(url: str):
    return create_engine(url, future=True, pool_pre_ping=True)


def get_engine(url: str | None = None):
    return _engine_for(_resolve_url(url))


@lru_cache
def _get_sessionmaker(url: str):
    return sessionmaker(bind=_engine_for(url), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session(url: str | None = None) -> Session:
    session: Session = _get_sessionmaker(_resolve_url(url))()
    try:
        yield session
    finally:
        session.close()
