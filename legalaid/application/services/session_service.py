"""
Session service orchestrator.

Coordinates chat session lifecycle operations: creation, history reads,
feedback, context updates, deletion and per-owner listing. The database is
authoritative; the cache mirror is refreshed after each commit.

Dependencies: legalaid.boundary.db.CRUD, legalaid.boundary.cache, legalaid.core
System role: Session use case orchestration
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.boundary.cache.session_cache import SessionCache
from legalaid.boundary.db.CRUD.chat_message_crud import chat_message_crud
from legalaid.boundary.db.CRUD.chat_session_crud import chat_session_crud
from legalaid.boundary.db.base import utcnow
from legalaid.boundary.db.models import ChatMessageModel, ChatSessionModel
from legalaid.core.exceptions import (
    AuthenticationRequiredError,
    MessageNotFoundError,
    PersistenceError,
    SessionForbiddenError,
    SessionNotFoundError,
    ValidationError,
)
from legalaid.core.identity import Caller
from legalaid.core.session.lifecycle import (
    SessionState,
    ensure_transition,
    generate_session_id,
    state_for_active_flag,
)
from legalaid.observability.log_utils import log_session_event

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT: dict[str, Any] = {"resolved": False}
MAX_HISTORY_LIMIT = 100
MAX_LIST_LIMIT = 100


def serialize_message(message: ChatMessageModel) -> dict[str, Any]:
    """Plain-dict view of a message for cache summaries."""
    return {
        "messageId": str(message.message_id),
        "role": message.role,
        "content": message.content,
        "language": message.language,
        "timestamp": message.timestamp.isoformat() if message.timestamp else None,
        "audioUrl": message.audio_url,
        "metadata": message.message_metadata,
    }


def build_session_summary(
    chat_session: ChatSessionModel,
    last_message: ChatMessageModel | None = None,
) -> dict[str, Any]:
    """Summary stored in the session cache mirror."""
    summary: dict[str, Any] = {
        "sessionId": chat_session.session_id,
        "userId": chat_session.user_id,
        "context": dict(chat_session.context or {}),
        "active": chat_session.active,
        "updatedAt": utcnow().isoformat(),
    }
    if chat_session.created_at is not None:
        summary["createdAt"] = chat_session.created_at.isoformat()
    if last_message is not None:
        summary["lastMessage"] = serialize_message(last_message)
    return summary


@dataclass
class HistoryPage:
    messages: Sequence[ChatMessageModel]
    total: int
    limit: int
    offset: int
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total


@dataclass
class SessionListItem:
    session: ChatSessionModel
    message_count: int


@dataclass
class SessionListPage:
    items: list[SessionListItem]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def ensure_session_access(chat_session: ChatSessionModel, caller: Caller) -> None:
    """
    Reject callers that do not own an owned session.

    Anonymous sessions (no owner) are open to anyone holding the id, and
    callers without an id are not checked.

    Raises:
        SessionForbiddenError: Caller is authenticated as someone other than the owner
    """
    if caller.id is not None and chat_session.user_id is not None and chat_session.user_id != caller.id:
        raise SessionForbiddenError(chat_session.session_id, caller.id)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession, session_cache: SessionCache) -> None:
        """
        Initialize session service.

        Args:
            db: Async SQLAlchemy session
            session_cache: Non-authoritative summary mirror
        """
        self.db = db
        self.session_cache = session_cache

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError("Failed to persist chat session", {"error": str(e)}) from e

    async def _load(self, session_id: str, caller: Caller, for_update: bool = False) -> ChatSessionModel:
        chat_session = await chat_session_crud.get_by_session_id(self.db, session_id, for_update=for_update)
        if chat_session is None:
            raise SessionNotFoundError(session_id)
        ensure_session_access(chat_session, caller)
        return chat_session

    async def create_session(
        self,
        caller: Caller,
        context: dict[str, Any] | None = None,
        name: str | None = None,
    ) -> ChatSessionModel:
        """
        Create an empty chat session owned by the caller.

        Args:
            caller: Requesting caller; its id (if any) becomes the owner
            context: Initial context merged over ``{"resolved": False}``
            name: Optional display name

        Returns:
            ChatSessionModel: The persisted session
        """
        values: dict[str, Any] = {
            "session_id": generate_session_id(),
            "user_id": caller.id,
            "context": {**DEFAULT_CONTEXT, **(context or {})},
            "status": SessionState.ACTIVE,
            "last_accessed": utcnow(),
        }
        if name:
            values["name"] = name

        chat_session = await chat_session_crud.create(self.db, **values)
        await self._commit()

        log_session_event(logger, "Chat session created", chat_session.session_id, caller, named=bool(name))
        await self.session_cache.set(chat_session.session_id, build_session_summary(chat_session))
        return chat_session

    async def get_history(
        self,
        caller: Caller,
        session_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> HistoryPage:
        """
        Return a contiguous page of a session transcript.

        Args:
            caller: Requesting caller
            session_id: External session token
            limit: Page size, 1 to 100
            offset: Messages to skip, at least 0

        Returns:
            HistoryPage: ``messages[offset:offset + limit]`` in append order

        Raises:
            ValidationError: limit or offset out of range
            SessionNotFoundError: Unknown session
            SessionForbiddenError: Caller does not own the session
        """
        if not 1 <= limit <= MAX_HISTORY_LIMIT:
            raise ValidationError("Limit must be between 1 and 100", field="limit")
        if offset < 0:
            raise ValidationError("Offset cannot be negative", field="offset")

        chat_session = await self._load(session_id, caller)
        total = await chat_message_crud.count_for_session(self.db, chat_session.id)
        messages = await chat_message_crud.get_page(self.db, chat_session.id, offset=offset, limit=limit)

        await chat_session_crud.touch(self.db, chat_session)
        await self._commit()

        return HistoryPage(
            messages=messages,
            total=total,
            limit=limit,
            offset=offset,
            context=dict(chat_session.context or {}),
        )

    async def submit_feedback(
        self,
        caller: Caller,
        session_id: str,
        rating: int,
        helpful: bool,
        feedback: str | None = None,
        message_index: int | None = None,
        message_id: UUID | None = None,
    ) -> None:
        """
        Attach feedback to one message of a session.

        The message is addressed by its stable ``message_id`` when given,
        otherwise by zero-based ``message_index`` in append order. Any caller
        may leave feedback.

        Raises:
            ValidationError: Bad rating, missing address or index out of range
            SessionNotFoundError: Unknown session
            MessageNotFoundError: Unknown message id
        """
        if not 1 <= rating <= 5:
            raise ValidationError("Rating must be between 1 and 5", field="rating")
        if message_id is None and message_index is None:
            raise ValidationError("Message index or message id is required", field="messageIndex")

        chat_session = await chat_session_crud.get_by_session_id(self.db, session_id)
        if chat_session is None:
            raise SessionNotFoundError(session_id)

        if message_id is not None:
            message = await chat_message_crud.get_by_message_id(self.db, chat_session.id, message_id)
            if message is None:
                raise MessageNotFoundError(session_id, str(message_id))
        else:
            total = await chat_message_crud.count_for_session(self.db, chat_session.id)
            if message_index < 0 or message_index >= total:
                raise ValidationError("Invalid message index", field="messageIndex")
            message = await chat_message_crud.get_by_index(self.db, chat_session.id, message_index)
            if message is None:
                raise ValidationError("Invalid message index", field="messageIndex")

        await chat_message_crud.add_feedback(
            self.db,
            message,
            rating=rating,
            helpful=helpful,
            feedback=feedback,
            rater_id=caller.id,
        )
        await chat_session_crud.touch(self.db, chat_session)
        await self._commit()
        log_session_event(logger, "Message feedback recorded", session_id, caller, rating=rating, helpful=helpful)
        await self.session_cache.set(chat_session.session_id, build_session_summary(chat_session))

    async def update_session(
        self,
        caller: Caller,
        session_id: str,
        context: dict[str, Any] | None = None,
        active: bool | None = None,
        name: str | None = None,
    ) -> ChatSessionModel:
        """
        Shallow-merge context and optionally toggle the active flag.

        Args:
            caller: Requesting caller
            session_id: External session token
            context: Keys to merge; unspecified keys are kept
            active: New active flag, unchanged when None
            name: New display name, unchanged when None

        Returns:
            ChatSessionModel: The updated session

        Raises:
            SessionNotFoundError: Unknown session
            SessionForbiddenError: Caller does not own the session
        """
        chat_session = await self._load(session_id, caller, for_update=True)

        # Merge first: it re-reads the row and would discard unflushed edits.
        if context:
            await chat_session_crud.merge_context(self.db, chat_session, context)
        if active is not None:
            target = ensure_transition(chat_session.status, state_for_active_flag(active))
            await chat_session_crud.set_state(self.db, chat_session, target)
        if name:
            chat_session.name = name

        await chat_session_crud.touch(self.db, chat_session)
        await self._commit()
        log_session_event(
            logger,
            "Chat session updated",
            session_id,
            caller,
            context_keys=",".join(sorted(context)) if context else None,
            status=chat_session.status.value,
        )
        await self.session_cache.set(chat_session.session_id, build_session_summary(chat_session))
        return chat_session

    async def delete_session(self, caller: Caller, session_id: str, confirm: bool = True) -> None:
        """
        Permanently delete a session, its messages and their feedback.

        Raises:
            ValidationError: ``confirm`` is not True
            SessionNotFoundError: Unknown session
            SessionForbiddenError: Caller does not own the session
        """
        if confirm is not True:
            raise ValidationError("Delete confirmation must be true", field="confirmDelete")

        chat_session = await self._load(session_id, caller, for_update=True)
        ensure_transition(chat_session.status, SessionState.DELETED)

        await chat_session_crud.delete_with_messages(self.db, chat_session)
        await self._commit()

        log_session_event(logger, "Chat session deleted", session_id, caller)
        await self.session_cache.delete(session_id)

    async def list_sessions(
        self,
        caller: Caller,
        active: bool | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> SessionListPage:
        """
        List the caller's sessions, most recently accessed first.

        Args:
            caller: Must be authenticated and not anonymous
            active: Optional filter on the active flag
            page: One-based page number
            limit: Page size, 1 to 100

        Returns:
            SessionListPage with per-session message counts

        Raises:
            AuthenticationRequiredError: Anonymous or missing caller
            ValidationError: page or limit out of range
        """
        if not caller.is_registered:
            raise AuthenticationRequiredError()
        if page < 1:
            raise ValidationError("Page must be at least 1", field="page")
        if not 1 <= limit <= MAX_LIST_LIMIT:
            raise ValidationError("Limit must be between 1 and 100", field="limit")

        state = state_for_active_flag(active) if active is not None else None
        rows, total = await chat_session_crud.list_for_owner(
            self.db,
            caller.id,
            state=state,
            offset=(page - 1) * limit,
            limit=limit,
        )
        counts = await chat_session_crud.message_counts(self.db, [row.id for row in rows])

        return SessionListPage(
            items=[SessionListItem(session=row, message_count=counts.get(row.id, 0)) for row in rows],
            page=page,
            limit=limit,
            total=total,
        )
