#!/usr/bin/env python3
"""
Matching Models - Inputs and results of the scoring engine.

Talent and job records arrive from the persistence layer (ORM rows) or from
plain JSON; ``from_record`` builds the engine's own immutable view of them so
the scoring functions never branch on storage details.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from core.matching.constants import (
    EngagementType,
    ExperienceLevel,
    ServiceCategory,
)

T = TypeVar('T')


@dataclass(frozen=True)
class OneOrMany(Generic[T]):
    """A field that holds either a single value or a collection of values.

    Built once at the data-model boundary; consumers only call ``contains``.
    An empty collection is a real (empty) set, not an absent value.
    """
    values: Tuple[T, ...]
    many: bool = False

    @classmethod
    def of(cls, value: Any, coerce: Optional[Callable[[Any], T]] = None) -> Optional['OneOrMany[T]']:
        if value is None or value == '':
            return None
        convert = coerce or (lambda v: v)
        if isinstance(value, (list, tuple, set, frozenset)):
            return cls(values=tuple(convert(v) for v in value), many=True)
        return cls(values=(convert(value),), many=False)

    def contains(self, item: T) -> bool:
        return item in self.values

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def to_value(self) -> Any:
        """Inverse of ``of``: a list when built from a collection, else the scalar."""
        plain = [v.value if hasattr(v, 'value') else v for v in self.values]
        return plain if self.many else plain[0]


def _optional_level(value: Any) -> Optional[ExperienceLevel]:
    if value is None or value == '':
        return None
    return ExperienceLevel(value)


def _strings(values: Optional[Iterable[Any]]) -> List[str]:
    return [str(v) for v in (values or [])]


def _field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, dict):
        return record.get(name, default)
    return getattr(record, name, default)


@dataclass(frozen=True)
class TalentProfile:
    """Engine view of a talent."""
    id: Any
    service_category: OneOrMany[ServiceCategory]
    skills: List[str]
    experience_level: ExperienceLevel
    engagement_preference: Optional[OneOrMany[EngagementType]] = None
    status: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> 'TalentProfile':
        return cls(
            id=_field(record, 'id'),
            service_category=OneOrMany.of(_field(record, 'service_category'), ServiceCategory)
            or OneOrMany(values=(), many=True),
            skills=_strings(_field(record, 'skills')),
            experience_level=ExperienceLevel(_field(record, 'experience_level')),
            engagement_preference=OneOrMany.of(_field(record, 'engagement_preference'), EngagementType),
            status=_field(record, 'status'),
            name=_field(record, 'name'),
        )


@dataclass(frozen=True)
class JobPosting:
    """Engine view of a job."""
    id: Any
    service_category: ServiceCategory
    required_skills: List[str]
    engagement_type: EngagementType
    experience_level: Optional[ExperienceLevel] = None
    status: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> 'JobPosting':
        return cls(
            id=_field(record, 'id'),
            service_category=ServiceCategory(_field(record, 'service_category')),
            required_skills=_strings(_field(record, 'required_skills')),
            engagement_type=EngagementType(_field(record, 'engagement_type')),
            experience_level=_optional_level(_field(record, 'experience_level')),
            status=_field(record, 'status'),
            title=_field(record, 'title'),
        )


@dataclass(frozen=True)
class MatchScoreBreakdown:
    """Integer percentages (0-100) per component plus the weighted total.

    Each value is rounded independently, so recombining the components with
    the weights may differ from ``total`` by a point or two.
    """
    skill_overlap: int
    category_match: int
    experience_match: int
    engagement_match: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'skillOverlap': self.skill_overlap,
            'categoryMatch': self.category_match,
            'experienceMatch': self.experience_match,
            'engagementMatch': self.engagement_match,
            'total': self.total,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MatchScoreBreakdown':
        return cls(
            skill_overlap=int(data.get('skillOverlap', 0)),
            category_match=int(data.get('categoryMatch', 0)),
            experience_match=int(data.get('experienceMatch', 0)),
            engagement_match=int(data.get('engagementMatch', 0)),
            total=int(data.get('total', 0)),
        )


@dataclass
class MatchResult:
    """Score of one (talent, job) pair."""
    talent_id: Any
    job_id: Any
    score: int
    breakdown: MatchScoreBreakdown
    matched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'talentId': str(self.talent_id) if self.talent_id is not None else None,
            'jobId': str(self.job_id) if self.job_id is not None else None,
            'score': self.score,
            'breakdown': self.breakdown.to_dict(),
            'matchedAt': self.matched_at.isoformat(),
        }
