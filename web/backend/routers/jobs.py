#!/usr/bin/env python3
"""
Job endpoints - a job's applications, applicant counts and bulk actions.
"""

import logging
from typing import Literal, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.lifecycle import ApplicationStatus
from ..dependencies import get_db, get_admin_id
from ..services.application_service import ApplicationService
from ..models.requests import BulkApplicationActionRequest
from ..models.responses import (
    ApplicantSummaryResponse,
    ApplicationListResponse,
    BulkActionResponse,
    BulkItemModel,
)
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("/{job_id}/applications", response_model=ApplicationListResponse)
def list_job_applications(
    job_id: str,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    status: Optional[ApplicationStatus] = Query(default=None, description="Filter by application status"),
    min_match_score: Optional[float] = Query(default=None, ge=0, le=100),
    sort_by: Literal['match_score', 'applied_at', 'updated_at'] = Query(default='match_score'),
    sort_order: Literal['asc', 'desc'] = Query(default='desc'),
    db: Session = Depends(get_db)
):
    """List a job's applications, best match first by default."""
    service = ApplicationService(db)
    data, pagination = service.list_for_job(
        validate_uuid(job_id, "job_id"),
        status=status.value if status else None,
        min_match_score=min_match_score,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order
    )
    return ApplicationListResponse(success=True, data=data, pagination=pagination)


@router.get("/{job_id}/applicants/summary", response_model=ApplicantSummaryResponse)
def applicant_summary(
    job_id: str,
    db: Session = Depends(get_db)
):
    """Counts of the job's applications per status."""
    service = ApplicationService(db)
    summary = service.applicant_summary(validate_uuid(job_id, "job_id"))
    return ApplicantSummaryResponse(success=True, **summary)


@router.post("/{job_id}/applications/bulk", response_model=BulkActionResponse)
def bulk_manage_applications(
    job_id: str,
    request: BulkApplicationActionRequest,
    admin_id: Optional[str] = Depends(get_admin_id),
    db: Session = Depends(get_db)
):
    """
    Apply one action to many talents' applications for this job.

    Items succeed or fail independently; the response reports each one.
    """
    service = ApplicationService(db)
    report = service.bulk_action(
        validate_uuid(job_id, "job_id"),
        request.talent_ids,
        request.action,
        notes=request.notes,
        admin_id=admin_id
    )
    return BulkActionResponse(
        success=report.failed == 0,
        job_id=str(report.job_id),
        action=report.action.value,
        succeeded=report.succeeded,
        failed=report.failed,
        results=[BulkItemModel(**item.to_dict()) for item in report.results]
    )
