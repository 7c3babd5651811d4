"""
Marketplace enumerations shared by the scoring engine, persistence and API.

All enums subclass ``str`` so values round-trip through JSON and text columns.
"""

from enum import Enum
from typing import Dict


class ServiceCategory(str, Enum):
    ITO = 'ITO'
    AI = 'AI'
    AUTOMATION = 'AUTOMATION'
    DATA_ANALYTICS = 'DATA_ANALYTICS'


class ExperienceLevel(str, Enum):
    JUNIOR = 'JUNIOR'
    MID = 'MID'
    SENIOR = 'SENIOR'
    LEAD = 'LEAD'
    ARCHITECT = 'ARCHITECT'


# Total order over experience levels. Never compare level strings directly.
EXPERIENCE_RANK: Dict[ExperienceLevel, int] = {
    ExperienceLevel.JUNIOR: 1,
    ExperienceLevel.MID: 2,
    ExperienceLevel.SENIOR: 3,
    ExperienceLevel.LEAD: 4,
    ExperienceLevel.ARCHITECT: 5,
}


class EngagementType(str, Enum):
    FULL_TIME = 'FULL_TIME'
    PART_TIME = 'PART_TIME'
    CONTRACT = 'CONTRACT'
    FREELANCE = 'FREELANCE'
    PROJECT_BASED = 'PROJECT_BASED'


class TalentStatus(str, Enum):
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    REJECTED = 'REJECTED'
    ARCHIVED = 'ARCHIVED'
    HIRED = 'HIRED'


class JobStatus(str, Enum):
    DRAFT = 'DRAFT'
    PENDING = 'PENDING'  # Awaiting approval
    PUBLISHED = 'PUBLISHED'  # Live and accepting applications
    REJECTED = 'REJECTED'
    ARCHIVED = 'ARCHIVED'
    CLOSED = 'CLOSED'  # No longer accepting applications
    EXPIRED = 'EXPIRED'
