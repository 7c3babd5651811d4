import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Numeric, UniqueConstraint, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class Application(Base):
    """
    One talent's candidacy for one job.

    Tracks:
    - Match score and breakdown at computation time
    - Review status (NEW|SHORTLISTED|HIRED|REJECTED)
    - Transition timestamps, set only when the transition happens
    """
    __tablename__ = 'application'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(UUID(as_uuid=True), ForeignKey('job.id', ondelete='CASCADE'), nullable=False)
    talent_id = Column(UUID(as_uuid=True), ForeignKey('talent.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Numeric(5, 2))
    match_breakdown = Column(JSONB, nullable=True)

    status = Column(Text, nullable=False, default='NEW')
    notes = Column(Text, nullable=True)

    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    shortlisted_at = Column(TIMESTAMP(timezone=True), nullable=True)
    hired_at = Column(TIMESTAMP(timezone=True), nullable=True)
    rejected_at = Column(TIMESTAMP(timezone=True), nullable=True)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    job = relationship("Job", back_populates="applications")
    talent = relationship("Talent", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('job_id', 'talent_id', name='uq_application_job_talent'),
        Index('idx_application_job', 'job_id'),
        Index('idx_application_talent', 'talent_id'),
        Index('idx_application_status', 'status'),
        Index('idx_application_score', 'match_score'),
    )
