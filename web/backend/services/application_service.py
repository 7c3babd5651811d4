#!/usr/bin/env python3
"""
Application service - business logic for applications and their review workflow.

The lifecycle rules live in core.lifecycle; this service loads the record,
asks the core for the next state, writes it back and records the audit event.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.config_loader import MatchWeights
from core.lifecycle import (
    ApplicationAction,
    ApplicationState,
    ApplicationStatus,
    BulkActionReport,
    InvalidTransitionError,
    TransitionResult,
    apply_action,
    bulk_apply,
    reject,
)
from core.matching import JobPosting, TalentProfile, calculate_match_score
from database.models import Application
from database.repositories import (
    ApplicationRepository,
    AuditLogRepository,
    JobRepository,
    TalentRepository,
)
from ..models.responses import ApplicationSummary
from ..utils import safe_float, safe_str, safe_datetime_iso, pagination_meta
from ..exceptions import (
    ApplicationConflictException,
    ApplicationNotFoundException,
    InvalidMatchScoreException,
    JobNotFoundException,
    TalentNotFoundException,
)

logger = logging.getLogger(__name__)


class ApplicationService:
    """Service for managing applications."""

    def __init__(self, db: Session, weights: Optional[MatchWeights] = None):
        self.db = db
        self.weights = weights or MatchWeights()
        self.applications = ApplicationRepository(db)
        self.talents = TalentRepository(db)
        self.jobs = JobRepository(db)
        self.audit = AuditLogRepository(db)

    def _get_job(self, job_id: Any):
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise JobNotFoundException(f"Job with ID {job_id} not found")
        return job

    def _get_talent(self, talent_id: Any):
        talent = self.talents.get_by_id(talent_id)
        if not talent:
            raise TalentNotFoundException(f"Talent with ID {talent_id} not found")
        return talent

    def _get_application(self, application_id: Any, for_update: bool = False) -> Application:
        application = self.applications.get_by_id(application_id, for_update=for_update)
        if not application:
            raise ApplicationNotFoundException(f"Application with ID {application_id} not found")
        return application

    def create(
        self,
        job_id: Any,
        talent_id: Any,
        match_score: Optional[float] = None,
        match_breakdown: Optional[Dict[str, Any]] = None
    ) -> ApplicationSummary:
        """
        Create a NEW application for a talent on a job.

        When no match score is supplied it is computed from the records.

        Raises:
            JobNotFoundException / TalentNotFoundException: Unknown ids.
            ApplicationConflictException: The pair already has an application.
        """
        job = self._get_job(job_id)
        talent = self._get_talent(talent_id)

        if self.applications.get_by_job_and_talent(job_id, talent_id):
            raise ApplicationConflictException("Application already exists for this job and talent")

        if match_score is None:
            result = calculate_match_score(
                TalentProfile.from_record(talent),
                JobPosting.from_record(job),
                self.weights
            )
            match_score = result.score
            match_breakdown = match_breakdown or result.breakdown.to_dict()

        try:
            application = self.applications.create(job_id, talent_id, match_score, match_breakdown)
            self.db.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent create for the same pair
            self.db.rollback()
            raise ApplicationConflictException("Application already exists for this job and talent") from e

        logger.info(f"Created application {application.id} (job={job_id}, talent={talent_id}, score={match_score})")
        return self._to_summary(application)

    def get(self, application_id: Any) -> ApplicationSummary:
        return self._to_summary(self._get_application(application_id))

    def list_for_job(
        self,
        job_id: Any,
        status: Optional[str] = None,
        min_match_score: Optional[float] = None,
        page: int = 1,
        limit: int = 20,
        sort_by: str = 'match_score',
        sort_order: str = 'desc'
    ) -> Tuple[List[ApplicationSummary], Dict[str, Any]]:
        self._get_job(job_id)
        rows, total = self.applications.query_for_job(
            job_id,
            status=status,
            min_match_score=min_match_score,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return [self._to_summary(r) for r in rows], pagination_meta(page, limit, total)

    def list_for_talent(
        self,
        talent_id: Any,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 20,
        sort_by: str = 'applied_at',
        sort_order: str = 'desc'
    ) -> Tuple[List[ApplicationSummary], Dict[str, Any]]:
        self._get_talent(talent_id)
        rows, total = self.applications.query_for_talent(
            talent_id,
            status=status,
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return [self._to_summary(r) for r in rows], pagination_meta(page, limit, total)

    def _persist_transition(self, application: Application, result: TransitionResult) -> None:
        for column, value in result.changes.items():
            setattr(application, column, value)

        if result.new_status == ApplicationStatus.HIRED:
            self.talents.mark_hired(application.talent_id)

        if result.audit_event.admin_id:
            self.audit.record(result.audit_event)

    def transition(
        self,
        application_id: Any,
        action: ApplicationAction,
        notes: Optional[str] = None,
        reason: Optional[str] = None,
        admin_id: Optional[str] = None
    ) -> Tuple[TransitionResult, ApplicationSummary]:
        """
        Apply a shortlist / hire / reject action to one application.

        Raises:
            ApplicationNotFoundException: Unknown application.
            ApplicationConflictException: Action not allowed from the current status.
        """
        # Row lock held until commit; concurrent actions on it run one after another
        application = self._get_application(application_id, for_update=True)
        state = ApplicationState.from_record(application)

        try:
            if ApplicationAction(action) == ApplicationAction.REJECT:
                result = reject(state, reason=reason, notes=notes, admin_id=admin_id)
            else:
                result = apply_action(state, action, notes=notes, admin_id=admin_id)
        except InvalidTransitionError as e:
            raise ApplicationConflictException(str(e)) from e

        self._persist_transition(application, result)
        self.db.commit()

        logger.info(
            f"Application {application_id}: {result.previous_status.value} -> {result.new_status.value}"
            f" (admin={admin_id or 'n/a'})"
        )
        return result, self._to_summary(application)

    def shortlist(self, application_id: Any, notes: Optional[str] = None, admin_id: Optional[str] = None):
        return self.transition(application_id, ApplicationAction.SHORTLIST, notes=notes, admin_id=admin_id)

    def hire(self, application_id: Any, notes: Optional[str] = None, admin_id: Optional[str] = None):
        return self.transition(application_id, ApplicationAction.HIRE, notes=notes, admin_id=admin_id)

    def reject(
        self,
        application_id: Any,
        reason: Optional[str] = None,
        notes: Optional[str] = None,
        admin_id: Optional[str] = None
    ):
        return self.transition(application_id, ApplicationAction.REJECT, notes=notes, reason=reason, admin_id=admin_id)

    def bulk_action(
        self,
        job_id: Any,
        talent_ids: Iterable[Any],
        action: ApplicationAction,
        notes: Optional[str] = None,
        admin_id: Optional[str] = None
    ) -> BulkActionReport:
        """
        Apply ``action`` to the job's application of each talent.

        Each item is written in its own savepoint, so one failure never undoes
        the others. The report lists every talent with its own outcome.
        """
        self._get_job(job_id)
        talent_ids = list(talent_ids)
        rows = self.applications.get_for_job_by_talents(job_id, talent_ids, for_update=True)
        states = {talent_id: ApplicationState.from_record(row) for talent_id, row in rows.items()}

        report = bulk_apply(job_id, talent_ids, action, states, notes=notes, admin_id=admin_id)

        for result in list(report.transitions):
            talent_id = result.application.talent_id
            try:
                with self.db.begin_nested():
                    self._persist_transition(rows[talent_id], result)
            except SQLAlchemyError as e:
                logger.error(f"Failed to persist bulk {report.action.value} for talent {talent_id}: {e}")
                report.mark_failed(talent_id, f"Failed to save application: {e}")

        self.db.commit()
        return report

    def update_match_score(
        self,
        application_id: Any,
        match_score: float,
        match_breakdown: Optional[Dict[str, Any]] = None
    ) -> ApplicationSummary:
        if match_score < 0 or match_score > 100:
            raise InvalidMatchScoreException("Match score must be between 0 and 100")

        application = self._get_application(application_id)
        application.match_score = match_score
        application.match_breakdown = match_breakdown
        self.db.commit()
        return self._to_summary(application)

    def applicant_summary(self, job_id: Any) -> Dict[str, Any]:
        """Counts of the job's applications per status."""
        job = self._get_job(job_id)
        counts = self.applications.status_counts_for_job(job_id)
        return {
            'job_id': str(job_id),
            'job_title': job.title,
            'total': sum(counts.values()),
            'new': counts.get(ApplicationStatus.NEW.value, 0),
            'shortlisted': counts.get(ApplicationStatus.SHORTLISTED.value, 0),
            'hired': counts.get(ApplicationStatus.HIRED.value, 0),
            'rejected': counts.get(ApplicationStatus.REJECTED.value, 0),
        }

    def _to_summary(self, application: Application) -> ApplicationSummary:
        talent = getattr(application, 'talent', None)
        job = getattr(application, 'job', None)
        return ApplicationSummary(
            application_id=safe_str(application.id),
            job_id=safe_str(application.job_id),
            talent_id=safe_str(application.talent_id),
            status=safe_str(application.status),
            match_score=safe_float(application.match_score),
            match_breakdown=application.match_breakdown,
            notes=application.notes,
            applied_at=safe_datetime_iso(application.applied_at),
            shortlisted_at=safe_datetime_iso(application.shortlisted_at),
            hired_at=safe_datetime_iso(application.hired_at),
            rejected_at=safe_datetime_iso(application.rejected_at),
            updated_at=safe_datetime_iso(application.updated_at),
            talent_name=talent.name if talent is not None else None,
            job_title=job.title if job is not None else None,
        )
