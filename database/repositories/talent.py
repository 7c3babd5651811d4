import logging
from typing import Any, Iterable, List, Optional
from sqlalchemy import select

from database.models import Talent
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TalentRepository(BaseRepository):
    def get_by_id(self, talent_id: Any) -> Optional[Talent]:
        return self.db.get(Talent, talent_id)

    def list_by_status(self, statuses: Iterable[str]) -> List[Talent]:
        stmt = select(Talent).where(
            Talent.status.in_(list(statuses))
        ).order_by(Talent.created_at)
        return self.db.execute(stmt).scalars().all()

    def add(self, talent: Talent) -> Talent:
        self.db.add(talent)
        self.flush()
        return talent

    def mark_hired(self, talent_id: Any) -> Optional[Talent]:
        talent = self.get_by_id(talent_id)
        if talent is None:
            logger.warning(f"Talent {talent_id} not found while marking hired")
            return None
        talent.status = 'HIRED'
        return talent
