from database.repositories.base import BaseRepository
from database.repositories.talent import TalentRepository
from database.repositories.job import JobRepository
from database.repositories.application import ApplicationRepository
from database.repositories.audit_log import AuditLogRepository

__all__ = [
    'BaseRepository',
    'TalentRepository',
    'JobRepository',
    'ApplicationRepository',
    'AuditLogRepository',
]
