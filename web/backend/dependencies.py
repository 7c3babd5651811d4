#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator, Optional
from fastapi import Header
from sqlalchemy.orm import Session

from core.config_loader import MatchWeights
from database.database import build_engine, build_session_factory
from .config import get_config


class DatabaseManager:
    """Engine and session factory for the API process."""

    def __init__(self, url: Optional[str] = None):
        self.engine = build_engine(url or get_config().database.url, pool_size=10, max_overflow=20)
        self.SessionLocal = build_session_factory(self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


@lru_cache()
def get_db_manager() -> DatabaseManager:
    """Database manager, created on first request."""
    return DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped session; closed after the response is sent.

    Services commit their own unit of work, so nothing is committed here.
    """
    yield from get_db_manager().get_session()


def get_match_weights() -> MatchWeights:
    """Configured match weights."""
    return get_config().matching.weights


def get_admin_id(x_admin_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """Acting admin, as forwarded by the authentication gateway in ``X-Admin-Id``."""
    return x_admin_id
