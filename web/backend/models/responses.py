#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MatchBreakdownModel(BaseModel):
    """Integer percentages per score component."""
    model_config = ConfigDict(populate_by_name=True)

    skill_overlap: int = Field(ge=0, le=100, alias="skillOverlap")
    category_match: int = Field(ge=0, le=100, alias="categoryMatch")
    experience_match: int = Field(ge=0, le=100, alias="experienceMatch")
    engagement_match: int = Field(ge=0, le=100, alias="engagementMatch")
    total: int = Field(ge=0)


class MatchItem(BaseModel):
    """One scored talent/job pair."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "talent_id": "550e8400-e29b-41d4-a716-446655440000",
                "job_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "name": "Jane Doe",
                "title": "Senior React Developer",
                "score": 86,
                "breakdown": {
                    "skillOverlap": 80,
                    "categoryMatch": 100,
                    "experienceMatch": 90,
                    "engagementMatch": 100,
                    "total": 86
                },
                "matched_at": "2026-02-01T12:00:00+00:00"
            }
        }
    )

    talent_id: str
    job_id: str
    name: Optional[str] = None
    title: Optional[str] = None
    score: int = Field(ge=0)
    breakdown: MatchBreakdownModel
    matched_at: Optional[str] = None


class MatchesResponse(BaseModel):
    """Response for ranked matches."""
    success: bool
    count: int
    matches: List[MatchItem]


class ScoreResponse(BaseModel):
    """Response for a single pair score."""
    success: bool
    match: MatchItem


class ApplicationSummary(BaseModel):
    """Summary of an application."""
    application_id: str
    job_id: str
    talent_id: str
    status: str
    match_score: Optional[float] = Field(None, ge=0, le=100)
    match_breakdown: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None
    applied_at: Optional[str] = None
    shortlisted_at: Optional[str] = None
    hired_at: Optional[str] = None
    rejected_at: Optional[str] = None
    updated_at: Optional[str] = None
    talent_name: Optional[str] = None
    job_title: Optional[str] = None


class ApplicationResponse(BaseModel):
    """Response for a single application."""
    success: bool
    application: ApplicationSummary


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class ApplicationListResponse(BaseModel):
    """Paginated application list."""
    success: bool
    data: List[ApplicationSummary]
    pagination: Pagination


class TransitionResponse(BaseModel):
    """Response for a shortlist / hire / reject action."""
    success: bool
    message: str
    previous_status: str
    application: ApplicationSummary


class BulkItemModel(BaseModel):
    talent_id: str
    success: bool
    status: Optional[str] = None
    error: Optional[str] = None
    application_id: Optional[str] = None


class BulkActionResponse(BaseModel):
    """Per-item outcome of a bulk action."""
    success: bool
    job_id: str
    action: str
    succeeded: int = Field(ge=0)
    failed: int = Field(ge=0)
    results: List[BulkItemModel]


class ApplicantSummaryResponse(BaseModel):
    """Counts of a job's applications per status."""
    success: bool
    job_id: str
    job_title: Optional[str] = None
    total: int = Field(ge=0)
    new: int = Field(ge=0)
    shortlisted: int = Field(ge=0)
    hired: int = Field(ge=0)
    rejected: int = Field(ge=0)
