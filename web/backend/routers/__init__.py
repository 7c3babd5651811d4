"""API route handlers."""

from .matching import router as matching_router
from .applications import router as applications_router
from .jobs import router as jobs_router
from .talents import router as talents_router
