"""
Chat session CRUD operations.

Provides session lookups by external id, atomic context merges,
owner-scoped listings and hard deletion of a session with its transcript.

Dependencies: sqlalchemy, legalaid.boundary.db.models
System role: Chat session persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.boundary.db.base import utcnow
from legalaid.boundary.db.CRUD.base_crud import BaseCRUD
from legalaid.boundary.db.models import ChatMessageModel, ChatSessionModel, MessageFeedbackModel
from legalaid.core.session.lifecycle import SessionState


class ChatSessionCRUD(BaseCRUD[ChatSessionModel]):
    """
    CRUD operations for ChatSessionModel.

    Extends BaseCRUD with lookups by the opaque ``session_id`` token and
    row-locked context merges.
    """

    def __init__(self) -> None:
        """Initialize ChatSessionCRUD with ChatSessionModel."""
        super().__init__(ChatSessionModel)

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: str,
        for_update: bool = False,
    ) -> ChatSessionModel | None:
        """
        Retrieve a session by its external identifier.

        Args:
            session: Async database session
            session_id: Opaque ``chat_<hex>`` token
            for_update: Lock the row until the transaction ends

        Returns:
            ChatSessionModel if found, None otherwise
        """
        stmt = select(ChatSessionModel).where(ChatSessionModel.session_id == session_id)
        if for_update:
            # Reload attributes of an already-loaded instance under the lock.
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def merge_context(
        self,
        session: AsyncSession,
        chat_session: ChatSessionModel,
        patch: dict,
    ) -> dict:
        """
        Shallow-merge ``patch`` into the session context.

        New keys overwrite, unspecified keys persist. The row is re-read under
        a lock first so a merge committed by another request is not lost.

        Args:
            session: Async database session
            chat_session: Session row to update
            patch: Keys to set

        Returns:
            The merged context
        """
        locked = await self.get_by_session_id(session, chat_session.session_id, for_update=True)
        target = locked if locked is not None else chat_session
        merged = {**(target.context or {}), **patch}
        # Reassign so the JSON column is flagged dirty.
        target.context = merged
        await session.flush()
        return merged

    async def touch(self, session: AsyncSession, chat_session: ChatSessionModel) -> None:
        chat_session.last_accessed = utcnow()
        await session.flush()

    async def set_state(
        self,
        session: AsyncSession,
        chat_session: ChatSessionModel,
        state: SessionState,
    ) -> None:
        """Persist a non-terminal lifecycle state."""
        chat_session.status = state
        await session.flush()

    async def list_for_owner(
        self,
        session: AsyncSession,
        user_id: str,
        state: SessionState | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[Sequence[ChatSessionModel], int]:
        """
        List an owner's sessions, most recently accessed first.

        Args:
            session: Async database session
            user_id: Owner to filter by
            state: Optional lifecycle filter
            offset: Number of sessions to skip
            limit: Maximum number of sessions to return

        Returns:
            Tuple of (page of sessions, total matching sessions)
        """
        criteria = [ChatSessionModel.user_id == user_id]
        if state is not None:
            criteria.append(ChatSessionModel.status == state)

        stmt = (
            select(ChatSessionModel)
            .where(*criteria)
            .order_by(
                ChatSessionModel.last_accessed.desc(),
                ChatSessionModel.created_at.desc(),
                ChatSessionModel.id,
            )
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        rows = result.scalars().all()
        total = await self.count(session, *criteria)
        return rows, total

    async def message_counts(
        self,
        session: AsyncSession,
        session_pks: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Return the number of messages per session primary key."""
        if not session_pks:
            return {}
        stmt = (
            select(ChatMessageModel.session_pk, func.count(ChatMessageModel.seq))
            .where(ChatMessageModel.session_pk.in_(session_pks))
            .group_by(ChatMessageModel.session_pk)
        )
        result = await session.execute(stmt)
        return {pk: int(n) for pk, n in result.all()}

    async def delete_with_messages(self, session: AsyncSession, chat_session: ChatSessionModel) -> None:
        """
        Hard-delete a session together with its messages and their feedback.

        Children are removed explicitly so the delete does not depend on the
        database enforcing ON DELETE CASCADE.
        """
        message_seqs = select(ChatMessageModel.seq).where(ChatMessageModel.session_pk == chat_session.id)
        await session.execute(
            delete(MessageFeedbackModel)
            .where(MessageFeedbackModel.message_seq.in_(message_seqs))
            .execution_options(synchronize_session=False)
        )
        await session.execute(
            delete(ChatMessageModel)
            .where(ChatMessageModel.session_pk == chat_session.id)
            .execution_options(synchronize_session=False)
        )
        await session.execute(
            delete(ChatSessionModel)
            .where(ChatSessionModel.id == chat_session.id)
            .execution_options(synchronize_session=False)
        )


chat_session_crud = ChatSessionCRUD()
