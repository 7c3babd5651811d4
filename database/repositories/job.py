import logging
from typing import Any, Iterable, List, Optional
from sqlalchemy import select

from database.models import Job
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    def get_by_id(self, job_id: Any) -> Optional[Job]:
        return self.db.get(Job, job_id)

    def list_by_status(self, statuses: Iterable[str]) -> List[Job]:
        stmt = select(Job).where(
            Job.status.in_(list(statuses))
        ).order_by(Job.created_at.desc())
        return self.db.execute(stmt).scalars().all()

    def add(self, job: Job) -> Job:
        self.db.add(job)
        self.flush()
        return job
