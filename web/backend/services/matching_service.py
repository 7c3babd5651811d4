#!/usr/bin/env python3
"""
Matching service - rank talents for jobs and jobs for talents.
"""

import logging
from typing import List, Optional, Any
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matching import (
    JobPosting,
    MatchResult,
    TalentProfile,
    calculate_match_score,
    rank_jobs_for_talent,
    rank_talents_for_job,
)
from database.repositories import JobRepository, TalentRepository
from ..models.responses import MatchItem, MatchBreakdownModel
from ..utils import safe_datetime_iso
from ..exceptions import JobNotFoundException, TalentNotFoundException

logger = logging.getLogger(__name__)


class MatchingService:
    """Service for scoring talents against jobs."""

    def __init__(self, db: Session, config: Optional[MatchingConfig] = None):
        self.db = db
        self.config = config or MatchingConfig()
        self.talents = TalentRepository(db)
        self.jobs = JobRepository(db)

    def _get_job(self, job_id: Any):
        job = self.jobs.get_by_id(job_id)
        if not job:
            raise JobNotFoundException(f"Job with ID {job_id} not found")
        return job

    def _get_talent(self, talent_id: Any):
        talent = self.talents.get_by_id(talent_id)
        if not talent:
            raise TalentNotFoundException(f"Talent with ID {talent_id} not found")
        return talent

    def match_talents_for_job(
        self,
        job_id: Any,
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[MatchItem]:
        """
        Rank eligible talents for a job.

        Args:
            job_id: The job ID.
            min_score: Minimum score filter (defaults to config).
            limit: Maximum number of results (defaults to config).

        Returns:
            Match items sorted by score (highest first).

        Raises:
            JobNotFoundException: If the job does not exist.
        """
        job = JobPosting.from_record(self._get_job(job_id))
        rows = self.talents.list_by_status(self.config.talent_statuses)
        talents = [TalentProfile.from_record(row) for row in rows]
        names = {t.id: t.name for t in talents}

        ranked = rank_talents_for_job(
            job,
            talents,
            weights=self.config.weights,
            min_score=min_score if min_score is not None else self.config.min_score,
            limit=limit if limit is not None else self.config.limit,
        )
        return [self._to_match_item(r, name=names.get(r.talent_id), title=job.title) for r in ranked]

    def match_jobs_for_talent(
        self,
        talent_id: Any,
        min_score: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[MatchItem]:
        """Rank eligible jobs for a talent. Raises TalentNotFoundException."""
        talent = TalentProfile.from_record(self._get_talent(talent_id))
        rows = self.jobs.list_by_status(self.config.job_statuses)
        jobs = [JobPosting.from_record(row) for row in rows]
        titles = {j.id: j.title for j in jobs}

        ranked = rank_jobs_for_talent(
            talent,
            jobs,
            weights=self.config.weights,
            min_score=min_score if min_score is not None else self.config.min_score,
            limit=limit if limit is not None else self.config.limit,
        )
        return [self._to_match_item(r, name=talent.name, title=titles.get(r.job_id)) for r in ranked]

    def score_pair(self, talent_id: Any, job_id: Any) -> MatchItem:
        talent = TalentProfile.from_record(self._get_talent(talent_id))
        job = JobPosting.from_record(self._get_job(job_id))
        result = calculate_match_score(talent, job, self.config.weights)
        return self._to_match_item(result, name=talent.name, title=job.title)

    @staticmethod
    def _to_match_item(result: MatchResult, name: Optional[str] = None, title: Optional[str] = None) -> MatchItem:
        return MatchItem(
            talent_id=str(result.talent_id),
            job_id=str(result.job_id),
            name=name,
            title=title,
            score=result.score,
            breakdown=MatchBreakdownModel(**result.breakdown.to_dict()),
            matched_at=safe_datetime_iso(result.matched_at),
        )
