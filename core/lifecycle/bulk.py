#!/usr/bin/env python3
"""
Bulk Transitions - Apply one action to many talents' applications for a job.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional
import logging

from core.lifecycle.errors import LifecycleError
from core.lifecycle.models import ApplicationState, BulkActionReport, BulkItemResult
from core.lifecycle.states import ApplicationAction
from core.lifecycle.transitions import apply_action

logger = logging.getLogger(__name__)


def bulk_apply(
    job_id: Any,
    talent_ids: Iterable[Any],
    action: ApplicationAction,
    applications: Mapping[Any, ApplicationState],
    notes: Optional[str] = None,
    admin_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> BulkActionReport:
    """
    Apply ``action`` to the application of each talent in ``talent_ids``.

    Args:
        job_id: Job the applications belong to
        talent_ids: Talents to act on, in request order
        action: SHORTLIST, HIRE or REJECT
        applications: talent_id -> ApplicationState for the job
        notes: Optional note recorded on every application
        admin_id: Optional admin recorded on every audit event
        now: Timestamp shared by all transitions in the batch

    Returns:
        BulkActionReport with one BulkItemResult per talent id; successful
        items also contribute a TransitionResult to ``report.transitions``.
    """
    action = ApplicationAction(action)
    timestamp = now or datetime.now(timezone.utc)
    report = BulkActionReport(job_id=job_id, action=action)
    # Later items see earlier transitions, so a repeated talent id fails as "already ..."
    current = dict(applications)

    for talent_id in talent_ids:
        application = current.get(talent_id)
        if application is None:
            report.results.append(BulkItemResult(
                talent_id=talent_id,
                success=False,
                error=f"No application for talent {talent_id} on job {job_id}",
            ))
            continue

        try:
            result = apply_action(application, action, notes=notes, admin_id=admin_id, now=timestamp)
        except LifecycleError as e:
            report.results.append(BulkItemResult(
                talent_id=talent_id,
                success=False,
                error=str(e),
                application_id=application.id,
            ))
            continue

        current[talent_id] = result.application
        report.transitions.append(result)
        report.results.append(BulkItemResult(
            talent_id=talent_id,
            success=True,
            status=result.new_status,
            application_id=application.id,
        ))

    logger.info(
        f"Bulk {action.value} on job {job_id}: {report.succeeded} succeeded, {report.failed} failed"
    )
    return report
