#!/usr/bin/env python3
"""
Component Scores - The four sub-scores of a match, each in [0, 1].

- Skill overlap: share of required job skills found in the talent's skills
- Category match: binary service-category membership
- Experience match: rank distance with asymmetric penalties
- Engagement match: binary engagement-type membership, neutral when unspecified
"""

from typing import List, Optional
import logging

from core.matching.constants import (
    EXPERIENCE_RANK,
    EngagementType,
    ExperienceLevel,
    ServiceCategory,
)
from core.matching.models import OneOrMany

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 0.5

OVERQUALIFIED_STEP = 0.1
OVERQUALIFIED_FLOOR = 0.7
UNDERQUALIFIED_STEP = 0.3
UNDERQUALIFIED_FLOOR = 0.0


def _normalize_skills(skills: List[str]) -> List[str]:
    return [s.lower().strip() for s in skills]


def calculate_skill_overlap(talent_skills: List[str], job_skills: List[str]) -> float:
    """
    Fraction of required job skills matched by the talent.

    A job skill counts as matched when some talent skill contains it or is
    contained by it, after lowercasing and trimming both. This is deliberately
    permissive: "react" matches "react.js", but "java" also matches
    "javascript", and synonyms such as "js" / "javascript" never match.

    Returns 0.0 when the job lists no skills.
    """
    if not job_skills:
        return 0.0

    normalized_talent = _normalize_skills(talent_skills)
    normalized_job = _normalize_skills(job_skills)

    matched = [
        job_skill for job_skill in normalized_job
        if any(talent_skill in job_skill or job_skill in talent_skill for talent_skill in normalized_talent)
    ]

    return len(matched) / len(normalized_job)


def calculate_category_match(
    talent_categories: OneOrMany[ServiceCategory],
    job_category: ServiceCategory
) -> float:
    """1.0 if the job's category is one of the talent's categories, else 0.0."""
    return 1.0 if talent_categories.contains(job_category) else 0.0


def calculate_experience_match(
    talent_level: ExperienceLevel,
    job_level: Optional[ExperienceLevel] = None
) -> float:
    """
    Experience compatibility based on EXPERIENCE_RANK.

    - Job without a target level: neutral 0.5
    - Same rank: 1.0
    - Over-qualified talent: max(0.7, 1 - 0.1 * diff)
    - Under-qualified talent: max(0.0, 1 - 0.3 * diff)
    """
    if job_level is None:
        return NEUTRAL_SCORE

    talent_rank = EXPERIENCE_RANK[talent_level]
    job_rank = EXPERIENCE_RANK[job_level]

    if talent_rank == job_rank:
        return 1.0

    if talent_rank > job_rank:
        diff = talent_rank - job_rank
        return max(OVERQUALIFIED_FLOOR, 1.0 - diff * OVERQUALIFIED_STEP)

    diff = job_rank - talent_rank
    return max(UNDERQUALIFIED_FLOOR, 1.0 - diff * UNDERQUALIFIED_STEP)


def calculate_engagement_match(
    talent_preference: Optional[OneOrMany[EngagementType]],
    job_engagement: EngagementType
) -> float:
    """Neutral 0.5 without a preference; otherwise 1.0 on membership, else 0.0."""
    if talent_preference is None:
        return NEUTRAL_SCORE

    return 1.0 if talent_preference.contains(job_engagement) else 0.0
