"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ChatSessionModel, ChatMessageModel, MessageFeedbackModel, UserUsageModel: Persisted entities
  - chat_session_crud, chat_message_crud, user_usage_crud: CRUD operation singletons

Dependencies: sqlalchemy, legalaid.configs
System role: Durable store for chat sessions, transcripts, feedback and usage counters.
"""

from legalaid.boundary.db.base import Base, TimestampMixin, UUIDMixin
from legalaid.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from legalaid.boundary.db.models import (
    ChatMessageModel,
    ChatSessionModel,
    MessageFeedbackModel,
    UserUsageModel,
)
from legalaid.boundary.db.CRUD import (
    BaseCRUD,
    ChatMessageCRUD,
    ChatSessionCRUD,
    UserUsageCRUD,
    chat_message_crud,
    chat_session_crud,
    user_usage_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChatSessionModel",
    "ChatMessageModel",
    "MessageFeedbackModel",
    "UserUsageModel",
    # CRUD classes
    "BaseCRUD",
    "ChatSessionCRUD",
    "ChatMessageCRUD",
    "UserUsageCRUD",
    # CRUD singletons
    "chat_session_crud",
    "chat_message_crud",
    "user_usage_crud",
]
