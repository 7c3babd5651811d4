"""Business logic services."""

from .matching_service import MatchingService
from .application_service import ApplicationService
