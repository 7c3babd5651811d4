#!/usr/bin/env python3
"""
Matching endpoints - ranked talents for a job, ranked jobs for a talent.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db
from ..services.matching_service import MatchingService
from ..models.responses import MatchesResponse, ScoreResponse
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.get("/jobs/{job_id}/talents", response_model=MatchesResponse)
def match_talents_for_job(
    job_id: str,
    min_score: Optional[int] = Query(default=None, ge=0, le=100, description="Minimum match score"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    db: Session = Depends(get_db)
):
    """
    Rank approved talents for a job.

    Defaults for min_score and limit come from the matching configuration.
    Returns matches sorted by score (highest first).
    """
    job_uuid = validate_uuid(job_id, "job_id")
    service = MatchingService(db, get_config().matching)
    matches = service.match_talents_for_job(job_uuid, min_score=min_score, limit=limit)

    return MatchesResponse(success=True, count=len(matches), matches=matches)


@router.get("/talents/{talent_id}/jobs", response_model=MatchesResponse)
def match_jobs_for_talent(
    talent_id: str,
    min_score: Optional[int] = Query(default=None, ge=0, le=100, description="Minimum match score"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    db: Session = Depends(get_db)
):
    """Rank published jobs for a talent."""
    talent_uuid = validate_uuid(talent_id, "talent_id")
    service = MatchingService(db, get_config().matching)
    matches = service.match_jobs_for_talent(talent_uuid, min_score=min_score, limit=limit)

    return MatchesResponse(success=True, count=len(matches), matches=matches)


@router.get("/score", response_model=ScoreResponse)
def score_pair(
    talent_id: str = Query(..., description="Talent ID"),
    job_id: str = Query(..., description="Job ID"),
    db: Session = Depends(get_db)
):
    """Score one talent against one job with its breakdown."""
    service = MatchingService(db, get_config().matching)
    match = service.score_pair(validate_uuid(talent_id, "talent_id"), validate_uuid(job_id, "job_id"))

    return ScoreResponse(success=True, match=match)
