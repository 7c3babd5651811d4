import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config_loader import load_config

logger = logging.getLogger(__name__)


def build_engine(url: Optional[str] = None, **kwargs) -> Engine:
    """Engine for ``url``, or for the configured database (DATABASE_URL wins)."""
    url = url or load_config().database.url
    return create_engine(url, pool_pre_ping=True, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Creating the engine does not connect; the first session does.
engine = build_engine()
SessionLocal = build_session_factory(engine)
