import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class Job(Base):
    __tablename__ = 'job'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_by = Column(Text, nullable=True)  # Admin ID

    title = Column(Text, nullable=False)
    description = Column(Text)
    service_category = Column(Text, nullable=False)
    required_skills = Column(ARRAY(Text), nullable=False, default=list)
    engagement_type = Column(Text, nullable=False)
    experience_level = Column(Text, nullable=True)  # None = no target level
    duration = Column(Text)

    status = Column(Text, nullable=False, default='DRAFT')  # DRAFT|PENDING|PUBLISHED|REJECTED|ARCHIVED|CLOSED|EXPIRED
    rejection_reason = Column(Text)
    extra = Column('metadata', JSONB, default={})

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))
    published_at = Column(TIMESTAMP(timezone=True))
    closed_at = Column(TIMESTAMP(timezone=True))

    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_status', 'status'),
        Index('idx_job_category', 'service_category'),
    )
