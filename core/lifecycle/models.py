#!/usr/bin/env python3
"""
Lifecycle Models - Application snapshots and transition results.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from core.lifecycle.states import ApplicationAction, ApplicationStatus

RESOURCE_TYPE_APPLICATION = 'APPLICATION'


@dataclass(frozen=True)
class ApplicationState:
    """Immutable snapshot of an application as read from storage."""
    id: Any
    job_id: Any
    talent_id: Any
    status: ApplicationStatus = ApplicationStatus.NEW
    match_score: Optional[float] = None
    match_breakdown: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    shortlisted_at: Optional[datetime] = None
    hired_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, record: Any) -> 'ApplicationState':
        return cls(
            id=record.id,
            job_id=record.job_id,
            talent_id=record.talent_id,
            status=ApplicationStatus(record.status),
            match_score=getattr(record, 'match_score', None),
            match_breakdown=getattr(record, 'match_breakdown', None),
            notes=getattr(record, 'notes', None),
            shortlisted_at=getattr(record, 'shortlisted_at', None),
            hired_at=getattr(record, 'hired_at', None),
            rejected_at=getattr(record, 'rejected_at', None),
        )


@dataclass(frozen=True)
class AuditEvent:
    """Descriptor of an admin action, persisted by the audit log collaborator."""
    action: str
    resource_id: Any
    metadata: Dict[str, Any] = field(default_factory=dict)
    resource_type: str = RESOURCE_TYPE_APPLICATION
    admin_id: Optional[str] = None


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a successful transition."""
    application: ApplicationState
    previous_status: ApplicationStatus
    timestamp_field: str
    audit_event: AuditEvent

    @property
    def new_status(self) -> ApplicationStatus:
        return self.application.status

    @property
    def changes(self) -> Dict[str, Any]:
        """Field values the persistence layer has to write."""
        return {
            'status': self.application.status.value,
            self.timestamp_field: getattr(self.application, self.timestamp_field),
            'notes': self.application.notes,
        }


@dataclass
class BulkItemResult:
    """Per-talent outcome of a bulk action."""
    talent_id: Any
    success: bool
    status: Optional[ApplicationStatus] = None
    error: Optional[str] = None
    application_id: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'talent_id': str(self.talent_id),
            'success': self.success,
            'status': self.status.value if self.status else None,
            'error': self.error,
            'application_id': str(self.application_id) if self.application_id is not None else None,
        }


@dataclass
class BulkActionReport:
    """Outcome of applying one action to many applications of a job.

    Items succeed or fail independently; the report is never collapsed into a
    single outcome.
    """
    job_id: Any
    action: ApplicationAction
    results: List[BulkItemResult] = field(default_factory=list)
    transitions: List[TransitionResult] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def errors(self) -> List[Dict[str, Any]]:
        return [{'talent_id': str(r.talent_id), 'error': r.error} for r in self.results if not r.success]

    def mark_failed(self, talent_id: Any, error: str) -> None:
        """Downgrade a previously successful item (e.g. its write failed)."""
        for item in self.results:
            if item.talent_id == talent_id:
                item.success = False
                item.status = None
                item.error = error
        self.transitions = [t for t in self.transitions if t.application.talent_id != talent_id]
