#!/usr/bin/env python3
"""
Lifecycle Module - Application review workflow.

Public API:
- shortlist / hire / reject / apply_action: Single-application transitions
- bulk_apply: One action over many talents' applications, reported per item
- ApplicationState, TransitionResult, AuditEvent: Snapshots and results
- InvalidTransitionError: Raised for disallowed transitions

The workflow is NEW -> SHORTLISTED -> HIRED, with REJECTED reachable from NEW
or SHORTLISTED. HIRED and REJECTED are terminal.
"""

from core.lifecycle.states import (
    TERMINAL_STATES,
    TRANSITIONS,
    ApplicationAction,
    ApplicationStatus,
    can_transition,
)
from core.lifecycle.errors import InvalidTransitionError, LifecycleError
from core.lifecycle.models import (
    ApplicationState,
    AuditEvent,
    BulkActionReport,
    BulkItemResult,
    TransitionResult,
)
from core.lifecycle.transitions import apply_action, hire, reject, shortlist
from core.lifecycle.bulk import bulk_apply

__all__ = [
    'TERMINAL_STATES',
    'TRANSITIONS',
    'ApplicationAction',
    'ApplicationStatus',
    'can_transition',
    'InvalidTransitionError',
    'LifecycleError',
    'ApplicationState',
    'AuditEvent',
    'BulkActionReport',
    'BulkItemResult',
    'TransitionResult',
    'apply_action',
    'bulk_apply',
    'hire',
    'reject',
    'shortlist',
]
