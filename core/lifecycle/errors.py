"""
Lifecycle errors and their operator-facing messages.
"""

from typing import Any, Optional

from core.lifecycle.states import TRANSITIONS, ApplicationAction, ApplicationStatus


class LifecycleError(Exception):
    """Base exception for application lifecycle errors."""
    pass


class InvalidTransitionError(LifecycleError):
    """Raised when an action is not allowed from the application's current status."""

    def __init__(
        self,
        current_status: ApplicationStatus,
        action: ApplicationAction,
        application_id: Optional[Any] = None,
        message: Optional[str] = None
    ):
        self.current_status = ApplicationStatus(current_status)
        self.action = ApplicationAction(action)
        self.application_id = application_id
        super().__init__(message or _describe(self.current_status, self.action))


_ALREADY = {
    ApplicationStatus.SHORTLISTED: 'Application is already shortlisted',
    ApplicationStatus.HIRED: 'Application is already marked as hired',
    ApplicationStatus.REJECTED: 'Application is already rejected',
}


def _describe(current: ApplicationStatus, action: ApplicationAction) -> str:
    transition = TRANSITIONS[action]
    if transition.target == current:
        return _ALREADY[current]
    return f"Cannot {transition.verb} a {current.value.lower()} application"
