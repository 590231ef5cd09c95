"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from legalaid.boundary.db.CRUD import chat_session_crud, chat_message_crud

    chat_session = await chat_session_crud.get_by_session_id(db, session_id)
    await chat_message_crud.append(db, chat_session.id, "user", "Hello", "en")
"""

from legalaid.boundary.db.CRUD.base_crud import BaseCRUD
from legalaid.boundary.db.CRUD.chat_message_crud import ChatMessageCRUD, chat_message_crud
from legalaid.boundary.db.CRUD.chat_session_crud import ChatSessionCRUD, chat_session_crud
from legalaid.boundary.db.CRUD.user_usage_crud import UserUsageCRUD, user_usage_crud

__all__ = [
    "BaseCRUD",
    "ChatSessionCRUD",
    "chat_session_crud",
    "ChatMessageCRUD",
    "chat_message_crud",
    "UserUsageCRUD",
    "user_usage_crud",
]
