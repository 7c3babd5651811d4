#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from uuid import UUID

from core.lifecycle import ApplicationAction

NOTE_MAX_LENGTH = 500


class CreateApplicationRequest(BaseModel):
    """Request to create an application for a talent on a job."""
    job_id: UUID
    talent_id: UUID
    match_score: Optional[float] = Field(
        None,
        ge=0,
        le=100,
        description="Match score (0-100), computed from the records when omitted"
    )
    match_breakdown: Optional[Dict[str, Any]] = Field(None, description="Match breakdown details")


class ApplicationActionRequest(BaseModel):
    """Optional note attached to a shortlist / hire / reject action."""
    notes: Optional[str] = Field(None, max_length=NOTE_MAX_LENGTH, description="Notes or reason for the action")
    reason: Optional[str] = Field(None, max_length=NOTE_MAX_LENGTH, description="Rejection reason (reject only)")


class BulkApplicationActionRequest(BaseModel):
    """Request to apply one action to many talents' applications for a job."""
    talent_ids: List[UUID] = Field(..., min_length=1, description="Talents to act on")
    action: ApplicationAction
    notes: Optional[str] = Field(None, max_length=NOTE_MAX_LENGTH)


class UpdateMatchScoreRequest(BaseModel):
    """Request to overwrite a stored match score."""
    match_score: float
    match_breakdown: Optional[Dict[str, Any]] = None
