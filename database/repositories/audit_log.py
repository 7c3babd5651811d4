import logging
from typing import Any, List
from sqlalchemy import select

from core.lifecycle import AuditEvent
from database.models import AuditLog
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class AuditLogRepository(BaseRepository):
    """Append-only access to the audit log: records are never updated or deleted."""

    def record(self, event: AuditEvent) -> AuditLog:
        if not event.admin_id:
            raise ValueError("Audit events require an admin_id")

        entry = AuditLog(
            admin_id=event.admin_id,
            action=event.action,
            resource_type=event.resource_type,
            resource_id=str(event.resource_id),
            details=dict(event.metadata),
        )
        self.db.add(entry)
        logger.info(f"Audit: {event.admin_id} {event.action} {event.resource_type}/{event.resource_id}")
        return entry

    def list_for_resource(self, resource_type: str, resource_id: Any) -> List[AuditLog]:
        stmt = select(AuditLog).where(
            AuditLog.resource_type == resource_type,
            AuditLog.resource_id == str(resource_id)
        ).order_by(AuditLog.created_at)
        return self.db.execute(stmt).scalars().all()
