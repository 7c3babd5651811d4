import contextlib
import logging

from sqlalchemy.orm import Session

from database.repositories import (
    ApplicationRepository,
    AuditLogRepository,
    JobRepository,
    TalentRepository,
)

logger = logging.getLogger(__name__)


class Repositories:
    """All repositories bound to a single Session."""

    def __init__(self, db: Session):
        self.db = db
        self.talents = TalentRepository(db)
        self.jobs = JobRepository(db)
        self.applications = ApplicationRepository(db)
        self.audit = AuditLogRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


@contextlib.contextmanager
def talent_uow():
    """Per-unit-of-work transaction scope.

    Yields Repositories bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with talent_uow() as repos:
            talent = repos.talents.get_by_id(talent_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    from database.database import SessionLocal

    session = SessionLocal()
    try:
        yield Repositories(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
