#!/usr/bin/env python3
"""
Application Transitions - NEW -> SHORTLISTED -> HIRED, or -> REJECTED.

Each operation takes an already-fetched ApplicationState and returns a
TransitionResult describing the new state and the audit event to record. The
input snapshot is never modified; a disallowed transition raises
InvalidTransitionError before anything is computed.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import logging

from core.lifecycle.errors import InvalidTransitionError
from core.lifecycle.models import ApplicationState, AuditEvent, TransitionResult
from core.lifecycle.states import TRANSITIONS, ApplicationAction, ApplicationStatus

logger = logging.getLogger(__name__)


def _transition(
    application: ApplicationState,
    action: ApplicationAction,
    note: Optional[str],
    note_key: str,
    admin_id: Optional[str],
    now: Optional[datetime]
) -> TransitionResult:
    transition = TRANSITIONS[action]
    current = ApplicationStatus(application.status)

    if current not in transition.allowed_from:
        raise InvalidTransitionError(current, action, application_id=application.id)

    timestamp = now or datetime.now(timezone.utc)

    updates: Dict[str, Any] = {
        'status': transition.target,
        transition.timestamp_field: timestamp,
    }
    if note is not None:
        updates['notes'] = note

    new_state = replace(application, **updates)

    audit_event = AuditEvent(
        action=transition.audit_action,
        resource_id=application.id,
        metadata={
            'jobId': str(application.job_id),
            'talentId': str(application.talent_id),
            note_key: note,
        },
        admin_id=admin_id,
    )

    logger.debug(f"Application {application.id}: {current.value} -> {transition.target.value}")

    return TransitionResult(
        application=new_state,
        previous_status=current,
        timestamp_field=transition.timestamp_field,
        audit_event=audit_event,
    )


def shortlist(
    application: ApplicationState,
    notes: Optional[str] = None,
    admin_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> TransitionResult:
    """Move a NEW application to SHORTLISTED and stamp ``shortlisted_at``."""
    return _transition(application, ApplicationAction.SHORTLIST, notes, 'notes', admin_id, now)


def hire(
    application: ApplicationState,
    notes: Optional[str] = None,
    admin_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> TransitionResult:
    """Move a NEW or SHORTLISTED application to HIRED and stamp ``hired_at``."""
    return _transition(application, ApplicationAction.HIRE, notes, 'notes', admin_id, now)


def reject(
    application: ApplicationState,
    reason: Optional[str] = None,
    notes: Optional[str] = None,
    admin_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> TransitionResult:
    """Move a NEW or SHORTLISTED application to REJECTED and stamp ``rejected_at``.

    The stored note is the reason when given, otherwise the notes.
    """
    return _transition(application, ApplicationAction.REJECT, reason or notes, 'reason', admin_id, now)


def apply_action(
    application: ApplicationState,
    action: ApplicationAction,
    notes: Optional[str] = None,
    admin_id: Optional[str] = None,
    now: Optional[datetime] = None
) -> TransitionResult:
    """Dispatch ``action`` to shortlist / hire / reject."""
    action = ApplicationAction(action)
    if action == ApplicationAction.SHORTLIST:
        return shortlist(application, notes=notes, admin_id=admin_id, now=now)
    if action == ApplicationAction.HIRE:
        return hire(application, notes=notes, admin_id=admin_id, now=now)
    return reject(application, reason=notes, admin_id=admin_id, now=now)
