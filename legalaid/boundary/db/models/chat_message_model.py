"""
Chat message and feedback ORM models.

Messages are append-only rows ordered by an autoincrement sequence, so two
concurrent appends to one session can never overwrite each other.

Dependencies: sqlalchemy, legalaid.boundary.db.base
System role: Conversation transcript persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, SmallInteger, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from legalaid.boundary.db.base import Base, UUIDMixin, utcnow


class ChatMessageModel(Base):
    """
    One turn of a conversation.

    Attributes:
        seq: Autoincrement primary key; defines transcript order
        message_id: Stable identifier handed to clients
        session_pk: Owning chat session
        role: "user" or "assistant"
        content: Message text
        language: Language code of the message
        timestamp: Creation time
        audio_url: Optional reference to recorded or synthesized audio
        message_metadata: Assistant reply metadata (legalTopic, confidence, relatedTopics)
    """

    __tablename__ = "chat_messages"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    message_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), unique=True, index=True, nullable=False, default=uuid.uuid4
    )
    session_pk: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("chat_sessions.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(String(16), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(8), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    audio_url: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    message_metadata: Mapped[dict | None] = mapped_column(JSON, nullable=True, default=None)

    session = relationship("ChatSessionModel", back_populates="messages")
    feedback = relationship(
        "MessageFeedbackModel",
        back_populates="message",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MessageFeedbackModel.timestamp",
        lazy="selectin",
    )


class MessageFeedbackModel(Base, UUIDMixin):
    """Rating left on a single message by any caller."""

    __tablename__ = "message_feedback"

    message_seq: Mapped[int] = mapped_column(
        ForeignKey("chat_messages.seq", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    rater_id: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    feedback: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    helpful: Mapped[bool] = mapped_column(Boolean, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    message = relationship("ChatMessageModel", back_populates="feedback")
