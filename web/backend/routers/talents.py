#!/usr/bin/env python3
"""
Talent endpoints - a talent's applications.
"""

from typing import Literal, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.lifecycle import ApplicationStatus
from ..dependencies import get_db
from ..services.application_service import ApplicationService
from ..models.responses import ApplicationListResponse
from ..utils import validate_uuid

router = APIRouter(prefix="/api/talents", tags=["talents"])


@router.get("/{talent_id}/applications", response_model=ApplicationListResponse)
def list_talent_applications(
    talent_id: str,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    status: Optional[ApplicationStatus] = Query(default=None),
    sort_by: Literal['match_score', 'applied_at', 'updated_at'] = Query(default='applied_at'),
    sort_order: Literal['asc', 'desc'] = Query(default='desc'),
    db: Session = Depends(get_db)
):
    """List a talent's applications, most recent first by default."""
    service = ApplicationService(db)
    data, pagination = service.list_for_talent(
        validate_uuid(talent_id, "talent_id"),
        status=status.value if status else None,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order
    )
    return ApplicationListResponse(success=True, data=data, pagination=pagination)
