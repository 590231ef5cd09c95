"""Service orchestrators."""

from .chat_service import ChatService, QueryOutcome
from .session_service import HistoryPage, SessionListPage, SessionService
from .usage_service import UsageTracker

__all__ = [
    "ChatService",
    "HistoryPage",
    "QueryOutcome",
    "SessionListPage",
    "SessionService",
    "UsageTracker",
]
