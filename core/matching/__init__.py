#!/usr/bin/env python3
"""
Matching Module - Talent/job compatibility scoring.

Public API:
- calculate_match_score: Score one talent against one job
- rank_talents_for_job / rank_jobs_for_talent: Score and order many candidates
- TalentProfile, JobPosting: Engine views of talent and job records
- MatchResult, MatchScoreBreakdown: Score results

The module is split into:

- constants.py: Marketplace enums and the experience ranking table
- models.py: Input views (OneOrMany, TalentProfile, JobPosting) and results
- components.py: The four component scores
- engine.py: Weighted aggregation, rounding and ranking
"""

from core.matching.constants import (
    EXPERIENCE_RANK,
    EngagementType,
    ExperienceLevel,
    JobStatus,
    ServiceCategory,
    TalentStatus,
)
from core.matching.models import (
    JobPosting,
    MatchResult,
    MatchScoreBreakdown,
    OneOrMany,
    TalentProfile,
)
from core.matching.engine import calculate_match_score, rank_jobs_for_talent, rank_talents_for_job

__all__ = [
    'EXPERIENCE_RANK',
    'EngagementType',
    'ExperienceLevel',
    'JobStatus',
    'ServiceCategory',
    'TalentStatus',
    'JobPosting',
    'MatchResult',
    'MatchScoreBreakdown',
    'OneOrMany',
    'TalentProfile',
    'calculate_match_score',
    'rank_jobs_for_talent',
    'rank_talents_for_job',
]
