"""
Application states, admin actions and the transition table between them.
"""

from enum import Enum
from typing import Dict, FrozenSet, NamedTuple


class ApplicationStatus(str, Enum):
    NEW = 'NEW'
    SHORTLISTED = 'SHORTLISTED'
    HIRED = 'HIRED'
    REJECTED = 'REJECTED'

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES: FrozenSet[ApplicationStatus] = frozenset({
    ApplicationStatus.HIRED,
    ApplicationStatus.REJECTED,
})


class ApplicationAction(str, Enum):
    SHORTLIST = 'SHORTLIST'
    HIRE = 'HIRE'
    REJECT = 'REJECT'


class Transition(NamedTuple):
    allowed_from: FrozenSet[ApplicationStatus]
    target: ApplicationStatus
    timestamp_field: str
    audit_action: str
    verb: str


TRANSITIONS: Dict[ApplicationAction, Transition] = {
    ApplicationAction.SHORTLIST: Transition(
        allowed_from=frozenset({ApplicationStatus.NEW}),
        target=ApplicationStatus.SHORTLISTED,
        timestamp_field='shortlisted_at',
        audit_action='SHORTLIST_APPLICATION',
        verb='shortlist',
    ),
    ApplicationAction.HIRE: Transition(
        allowed_from=frozenset({ApplicationStatus.NEW, ApplicationStatus.SHORTLISTED}),
        target=ApplicationStatus.HIRED,
        timestamp_field='hired_at',
        audit_action='HIRE_APPLICATION',
        verb='hire',
    ),
    ApplicationAction.REJECT: Transition(
        allowed_from=frozenset({ApplicationStatus.NEW, ApplicationStatus.SHORTLISTED}),
        target=ApplicationStatus.REJECTED,
        timestamp_field='rejected_at',
        audit_action='REJECT_APPLICATION',
        verb='reject',
    ),
}


def can_transition(current: ApplicationStatus, action: ApplicationAction) -> bool:
    return ApplicationStatus(current) in TRANSITIONS[ApplicationAction(action)].allowed_from
