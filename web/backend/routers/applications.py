#!/usr/bin/env python3
"""
Application endpoints - create applications and drive the review workflow.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import MatchWeights
from core.lifecycle import ApplicationAction
from ..dependencies import get_db, get_admin_id, get_match_weights
from ..services.application_service import ApplicationService
from ..models.requests import (
    ApplicationActionRequest,
    CreateApplicationRequest,
    UpdateMatchScoreRequest,
)
from ..models.responses import ApplicationResponse, TransitionResponse
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])

_PAST_TENSE = {
    ApplicationAction.SHORTLIST: "shortlisted",
    ApplicationAction.HIRE: "hired",
    ApplicationAction.REJECT: "rejected",
}


@router.post("", response_model=ApplicationResponse, status_code=201)
def create_application(
    request: CreateApplicationRequest,
    db: Session = Depends(get_db),
    weights: MatchWeights = Depends(get_match_weights)
):
    """
    Create a NEW application linking a talent to a job.

    The match score is computed from the records when not supplied.
    At most one application exists per (job, talent) pair.
    """
    service = ApplicationService(db, weights)
    application = service.create(
        request.job_id,
        request.talent_id,
        match_score=request.match_score,
        match_breakdown=request.match_breakdown
    )
    return ApplicationResponse(success=True, application=application)


@router.get("/{application_id}", response_model=ApplicationResponse)
def get_application(
    application_id: str,
    db: Session = Depends(get_db)
):
    """Get a single application."""
    service = ApplicationService(db)
    application = service.get(validate_uuid(application_id, "application_id"))
    return ApplicationResponse(success=True, application=application)


def _run_action(
    application_id: str,
    action: ApplicationAction,
    request: Optional[ApplicationActionRequest],
    admin_id: Optional[str],
    db: Session
) -> TransitionResponse:
    request = request or ApplicationActionRequest()
    service = ApplicationService(db)
    result, application = service.transition(
        validate_uuid(application_id, "application_id"),
        action,
        notes=request.notes,
        reason=request.reason,
        admin_id=admin_id
    )
    return TransitionResponse(
        success=True,
        message=f"Application {_PAST_TENSE[action]} successfully",
        previous_status=result.previous_status.value,
        application=application
    )


@router.post("/{application_id}/shortlist", response_model=TransitionResponse)
def shortlist_application(
    application_id: str,
    request: Optional[ApplicationActionRequest] = None,
    admin_id: Optional[str] = Depends(get_admin_id),
    db: Session = Depends(get_db)
):
    """Move a NEW application to SHORTLISTED."""
    return _run_action(application_id, ApplicationAction.SHORTLIST, request, admin_id, db)


@router.post("/{application_id}/hire", response_model=TransitionResponse)
def hire_application(
    application_id: str,
    request: Optional[ApplicationActionRequest] = None,
    admin_id: Optional[str] = Depends(get_admin_id),
    db: Session = Depends(get_db)
):
    """Mark an application as HIRED (also marks the talent as hired)."""
    return _run_action(application_id, ApplicationAction.HIRE, request, admin_id, db)


@router.post("/{application_id}/reject", response_model=TransitionResponse)
def reject_application(
    application_id: str,
    request: Optional[ApplicationActionRequest] = None,
    admin_id: Optional[str] = Depends(get_admin_id),
    db: Session = Depends(get_db)
):
    """Reject a NEW or SHORTLISTED application."""
    return _run_action(application_id, ApplicationAction.REJECT, request, admin_id, db)


@router.patch("/{application_id}/match-score", response_model=ApplicationResponse)
def update_match_score(
    application_id: str,
    request: UpdateMatchScoreRequest,
    db: Session = Depends(get_db)
):
    """Overwrite the stored match score (0-100) and breakdown."""
    service = ApplicationService(db)
    application = service.update_match_score(
        validate_uuid(application_id, "application_id"),
        request.match_score,
        request.match_breakdown
    )
    return ApplicationResponse(success=True, application=application)
