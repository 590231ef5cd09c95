"""ORM models."""

from legalaid.boundary.db.models.chat_message_model import ChatMessageModel, MessageFeedbackModel
from legalaid.boundary.db.models.chat_session_model import ChatSessionModel
from legalaid.boundary.db.models.user_usage_model import UserUsageModel

__all__ = [
    "ChatMessageModel",
    "ChatSessionModel",
    "MessageFeedbackModel",
    "UserUsageModel",
]
