import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from sqlalchemy import select, func
from sqlalchemy.orm import joinedload

from database.models import Application
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    'match_score': Application.match_score,
    'applied_at': Application.applied_at,
    'updated_at': Application.updated_at,
}


class ApplicationRepository(BaseRepository):
    def get_by_id(self, application_id: Any, for_update: bool = False) -> Optional[Application]:
        """``for_update`` takes a row lock (SELECT ... FOR UPDATE) held until commit."""
        if for_update:
            return self.db.get(Application, application_id, with_for_update=True, populate_existing=True)
        return self.db.get(Application, application_id)

    def get_by_job_and_talent(self, job_id: Any, talent_id: Any) -> Optional[Application]:
        stmt = select(Application).where(
            Application.job_id == job_id,
            Application.talent_id == talent_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_job_by_talents(
        self,
        job_id: Any,
        talent_ids: Iterable[Any],
        for_update: bool = False
    ) -> Dict[Any, Application]:
        """Applications of ``job_id`` keyed by talent id, for the given talents."""
        talent_ids = list(talent_ids)
        if not talent_ids:
            return {}

        stmt = select(Application).where(
            Application.job_id == job_id,
            Application.talent_id.in_(talent_ids)
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        rows = self.db.execute(stmt).scalars().all()
        return {row.talent_id: row for row in rows}

    def create(
        self,
        job_id: Any,
        talent_id: Any,
        match_score: Optional[float] = None,
        match_breakdown: Optional[Dict[str, Any]] = None
    ) -> Application:
        application = Application(
            job_id=job_id,
            talent_id=talent_id,
            match_score=match_score,
            match_breakdown=match_breakdown,
            status='NEW',
        )
        self.db.add(application)
        self.flush()
        return application

    def _paginate(
        self,
        stmt,
        page: int,
        limit: int,
        sort_by: str,
        sort_order: str
    ) -> Tuple[List[Application], int]:
        total = self.db.execute(
            select(func.count()).select_from(stmt.subquery())
        ).scalar_one()

        column = SORTABLE_COLUMNS.get(sort_by, Application.updated_at)
        ordering = column.asc() if sort_order == 'asc' else column.desc()

        stmt = stmt.order_by(ordering).offset((page - 1) * limit).limit(limit)
        rows = self.db.execute(stmt).unique().scalars().all()
        return rows, total

    def query_for_job(
        self,
        job_id: Any,
        status: Optional[str] = None,
        min_match_score: Optional[float] = None,
        page: int = 1,
        limit: int = 20,
        sort_by: str = 'match_score',
        sort_order: str = 'desc'
    ) -> Tuple[List[Application], int]:
        stmt = select(Application).options(
            joinedload(Application.talent)
        ).where(Application.job_id == job_id)

        if status:
            stmt = stmt.where(Application.status == status)

        if min_match_score is not None:
            stmt = stmt.where(Application.match_score >= min_match_score)

        return self._paginate(stmt, page, limit, sort_by, sort_order)

    def query_for_talent(
        self,
        talent_id: Any,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
        sort_by: str = 'applied_at',
        sort_order: str = 'desc'
    ) -> Tuple[List[Application], int]:
        stmt = select(Application).options(
            joinedload(Application.job)
        ).where(Application.talent_id == talent_id)

        if status:
            stmt = stmt.where(Application.status == status)

        return self._paginate(stmt, page, limit, sort_by, sort_order)

    def status_counts_for_job(self, job_id: Any) -> Dict[str, int]:
        stmt = select(Application.status, func.count()).where(
            Application.job_id == job_id
        ).group_by(Application.status)
        return {status: count for status, count in self.db.execute(stmt).all()}
