"""
Chat message CRUD operations.

Messages are append-only; every append is a single INSERT so concurrent
writers to one session never overwrite each other.

Dependencies: sqlalchemy, legalaid.boundary.db.models
System role: Transcript persistence and feedback attachment
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.boundary.db.CRUD.base_crud import BaseCRUD
from legalaid.boundary.db.models import ChatMessageModel, MessageFeedbackModel


class ChatMessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        super().__init__(ChatMessageModel)

    async def append(
        self,
        session: AsyncSession,
        session_pk: UUID,
        role: str,
        content: str,
        language: str,
        audio_url: str | None = None,
        metadata: dict | None = None,
    ) -> ChatMessageModel:
        """
        Append one message to a session transcript.

        Args:
            session: Async database session
            session_pk: Primary key of the owning chat session
            role: "user" or "assistant"
            content: Message text
            language: Language code of the message
            audio_url: Optional audio reference
            metadata: Optional assistant metadata

        Returns:
            The persisted message with its sequence number and message_id
        """
        return await self.create(
            session,
            session_pk=session_pk,
            role=role,
            content=content,
            language=language,
            audio_url=audio_url,
            message_metadata=metadata,
        )

    async def count_for_session(self, session: AsyncSession, session_pk: UUID) -> int:
        return await self.count(session, ChatMessageModel.session_pk == session_pk)

    async def get_page(
        self,
        session: AsyncSession,
        session_pk: UUID,
        offset: int = 0,
        limit: int = 50,
    ) -> Sequence[ChatMessageModel]:
        """
        Return the contiguous slice ``[offset, offset + limit)`` of a transcript.

        Args:
            session: Async database session
            session_pk: Primary key of the owning chat session
            offset: Number of messages to skip
            limit: Maximum number of messages to return

        Returns:
            Messages in append order
        """
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_pk == session_pk)
            .order_by(ChatMessageModel.seq)
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_index(
        self,
        session: AsyncSession,
        session_pk: UUID,
        index: int,
    ) -> ChatMessageModel | None:
        """Return the message at zero-based position ``index`` in append order."""
        page = await self.get_page(session, session_pk, offset=index, limit=1)
        return page[0] if page else None

    async def get_by_message_id(
        self,
        session: AsyncSession,
        session_pk: UUID,
        message_id: UUID,
    ) -> ChatMessageModel | None:
        stmt = select(ChatMessageModel).where(
            ChatMessageModel.session_pk == session_pk,
            ChatMessageModel.message_id == message_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_feedback(
        self,
        session: AsyncSession,
        message: ChatMessageModel,
        rating: int,
        helpful: bool,
        feedback: str | None = None,
        rater_id: str | None = None,
    ) -> MessageFeedbackModel:
        """
        Attach a feedback entry to a message.

        Args:
            session: Async database session
            message: Message being rated
            rating: Score from 1 to 5
            helpful: Whether the reply helped
            feedback: Optional free text
            rater_id: Caller id, None for anonymous raters

        Returns:
            The persisted feedback row
        """
        entry = MessageFeedbackModel(
            message_seq=message.seq,
            rater_id=rater_id,
            rating=rating,
            helpful=helpful,
            feedback=feedback,
        )
        session.add(entry)
        await session.flush()
        await session.refresh(message, attribute_names=["feedback"])
        return entry


chat_message_crud = ChatMessageCRUD()
