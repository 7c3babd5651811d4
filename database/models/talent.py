import uuid

from sqlalchemy import Column, BigInteger, Integer, Text, TIMESTAMP, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class Talent(Base):
    """
    Talent profile submitted through onboarding and reviewed by admins.

    service_category and engagement_preference are stored as arrays; a single
    value is an array of one.
    """
    __tablename__ = 'talent'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    telegram_id = Column(BigInteger, nullable=True, unique=True)
    name = Column(Text, nullable=False)

    service_category = Column(ARRAY(Text), nullable=False, default=list)
    role_specialization = Column(Text)
    skills = Column(ARRAY(Text), nullable=False, default=list)
    experience_level = Column(Text, nullable=False)  # JUNIOR|MID|SENIOR|LEAD|ARCHITECT
    years_of_experience = Column(Integer)
    engagement_preference = Column(ARRAY(Text), nullable=True)
    availability = Column(Text, default='AVAILABLE')
    bio = Column(Text)
    cv_url = Column(Text)

    status = Column(Text, nullable=False, default='PENDING')  # PENDING|APPROVED|REJECTED|ARCHIVED|HIRED
    extra = Column('metadata', JSONB, default={})

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    applications = relationship("Application", back_populates="talent", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_talent_status', 'status'),
        Index('idx_talent_experience', 'experience_level'),
    )
