from .base import Base
from .talent import Talent
from .job import Job
from .application import Application
from .audit_log import AuditLog

__all__ = [
    'Base',
    'Talent',
    'Job',
    'Application',
    'AuditLog',
]
