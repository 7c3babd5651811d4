import logging

from database.models import Base

logger = logging.getLogger(__name__)


def init_db(engine) -> None:
    """Create all tables that don't exist yet."""
    Base.metadata.create_all(engine)
    logger.info(f"Database schema ready ({len(Base.metadata.tables)} tables)")
