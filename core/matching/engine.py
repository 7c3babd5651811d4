#!/usr/bin/env python3
"""
Match Score Engine - Weighted aggregation of the component scores.

Pure and deterministic: no I/O, no shared state, safe to call concurrently.
"""

from typing import Dict, List, Optional, Union
import logging
import math

from core.config_loader import MatchWeights, resolve_weights
from core.matching.components import (
    calculate_category_match,
    calculate_engagement_match,
    calculate_experience_match,
    calculate_skill_overlap,
)
from core.matching.models import JobPosting, MatchResult, MatchScoreBreakdown, TalentProfile

logger = logging.getLogger(__name__)

WeightsArg = Optional[Union[MatchWeights, Dict[str, float]]]


def to_percent(value: float) -> int:
    """Round a [0, 1] fraction to an integer percentage, halves rounding up."""
    return int(math.floor(value * 100 + 0.5))


def calculate_match_score(
    talent: TalentProfile,
    job: JobPosting,
    weights: WeightsArg = None
) -> MatchResult:
    """
    Score a talent against a job.

    Formula: total = sum(component * weight), weights defaulting to
    skill 0.5 / category 0.2 / experience 0.2 / engagement 0.1. A partial
    mapping overrides individual defaults. Weights are not renormalized.

    Every component and the total are rounded to a percentage independently;
    the breakdown is a display approximation of the total, not an exact
    decomposition.

    Returns:
        MatchResult with ``score`` (0-100 for weights summing to 1) and
        ``breakdown``.
    """
    w = resolve_weights(weights)

    skill_overlap = calculate_skill_overlap(talent.skills, job.required_skills)
    category_match = calculate_category_match(talent.service_category, job.service_category)
    experience_match = calculate_experience_match(talent.experience_level, job.experience_level)
    engagement_match = calculate_engagement_match(talent.engagement_preference, job.engagement_type)

    total = (
        skill_overlap * w.skill_overlap +
        category_match * w.category_match +
        experience_match * w.experience_match +
        engagement_match * w.engagement_match
    )

    score = to_percent(total)
    breakdown = MatchScoreBreakdown(
        skill_overlap=to_percent(skill_overlap),
        category_match=to_percent(category_match),
        experience_match=to_percent(experience_match),
        engagement_match=to_percent(engagement_match),
        total=score,
    )

    logger.debug(
        "Match score %d for talent=%s job=%s (skills=%.2f, category=%.0f, experience=%.2f, engagement=%.2f)",
        score, talent.id, job.id, skill_overlap, category_match, experience_match, engagement_match
    )

    return MatchResult(talent_id=talent.id, job_id=job.id, score=score, breakdown=breakdown)


def _apply_result_policy(
    results: List[MatchResult],
    min_score: Optional[int],
    limit: Optional[int]
) -> List[MatchResult]:
    # sorted() is stable: equal scores keep their input order
    ranked = sorted(results, key=lambda r: r.score, reverse=True)

    if min_score is not None:
        ranked = [r for r in ranked if r.score >= min_score]

    if limit is not None:
        ranked = ranked[:limit]

    return ranked


def rank_talents_for_job(
    job: JobPosting,
    talents: List[TalentProfile],
    weights: WeightsArg = None,
    min_score: Optional[int] = None,
    limit: Optional[int] = None
) -> List[MatchResult]:
    """Score every talent against ``job``, best first."""
    w = resolve_weights(weights)
    results = [calculate_match_score(talent, job, w) for talent in talents]
    ranked = _apply_result_policy(results, min_score, limit)
    logger.info(f"Ranked {len(talents)} talents for job {job.id}: {len(ranked)} kept")
    return ranked


def rank_jobs_for_talent(
    talent: TalentProfile,
    jobs: List[JobPosting],
    weights: WeightsArg = None,
    min_score: Optional[int] = None,
    limit: Optional[int] = None
) -> List[MatchResult]:
    """Score ``talent`` against every job, best first."""
    w = resolve_weights(weights)
    results = [calculate_match_score(talent, job, w) for job in jobs]
    ranked = _apply_result_policy(results, min_score, limit)
    logger.info(f"Ranked {len(jobs)} jobs for talent {talent.id}: {len(ranked)} kept")
    return ranked
