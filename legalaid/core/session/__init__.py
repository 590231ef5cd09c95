"""Chat session lifecycle rules."""

from legalaid.core.session.lifecycle import (
    SessionState,
    can_transition,
    ensure_transition,
    generate_session_id,
    state_for_active_flag,
)

__all__ = [
    "SessionState",
    "can_transition",
    "ensure_transition",
    "generate_session_id",
    "state_for_active_flag",
]
