"""
Chat session lifecycle.

Sessions move between ACTIVE and INACTIVE freely; DELETED is terminal.
Deletion is a hard delete in the store, so DELETED is never persisted.

Dependencies: legalaid.core.exceptions
System role: Session state machine and identifier generation
"""

import enum
import uuid

from legalaid.core.exceptions import InvalidSessionTransitionError

SESSION_ID_PREFIX = "chat"


class SessionState(str, enum.Enum):
    """Lifecycle state of a chat session."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETED = "deleted"


_ALLOWED: dict[SessionState, frozenset[SessionState]] = {
    SessionState.ACTIVE: frozenset({SessionState.ACTIVE, SessionState.INACTIVE, SessionState.DELETED}),
    SessionState.INACTIVE: frozenset({SessionState.ACTIVE, SessionState.INACTIVE, SessionState.DELETED}),
    SessionState.DELETED: frozenset(),
}


def can_transition(current: SessionState, target: SessionState) -> bool:
    """Return whether ``current`` may move to ``target``."""
    return target in _ALLOWED[current]


def ensure_transition(current: SessionState, target: SessionState) -> SessionState:
    """
    Validate a lifecycle transition.

    Args:
        current: Present state
        target: Requested state

    Returns:
        SessionState: The target state

    Raises:
        InvalidSessionTransitionError: If the move is not allowed
    """
    if not can_transition(current, target):
        raise InvalidSessionTransitionError(current.value, target.value)
    return target


def state_for_active_flag(active: bool) -> SessionState:
    return SessionState.ACTIVE if active else SessionState.INACTIVE


def generate_session_id() -> str:
    """Generate an opaque, globally unique session token."""
    return f"{SESSION_ID_PREFIX}_{uuid.uuid4().hex}"
