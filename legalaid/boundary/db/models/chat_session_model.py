"""
Chat session ORM model.

Represents one multi-turn conversation between a caller and the assistant.

Dependencies: sqlalchemy, legalaid.boundary.db.base, legalaid.core.session
System role: Durable conversation state
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from legalaid.boundary.db.base import Base, TimestampMixin, UUIDMixin, utcnow
from legalaid.core.session.lifecycle import SessionState


def default_session_name() -> str:
    now = utcnow()
    return f"Chat {now.month}/{now.day}/{now.year} {now.hour}:{now.minute:02d}"


class ChatSessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Chat session ORM model.

    The message log lives in ``chat_messages`` ordered by its autoincrement
    sequence; the session row only holds ownership, context and status.
    Only ACTIVE and INACTIVE are ever stored: deletion removes the row.

    Attributes:
        id: Internal UUID primary key
        session_id: Opaque external identifier (``chat_<hex>``)
        user_id: Owner id, None for anonymous sessions
        name: Display name
        context: Shallow key/value bag (legalTopic, userLocation, resolved, ...)
        status: Lifecycle state
        last_accessed: Touched on every read and write
    """

    __tablename__ = "chat_sessions"

    session_id: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(64), index=True, nullable=True, default=None)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default=default_session_name)
    context: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    status: Mapped[SessionState] = mapped_column(
        Enum(
            SessionState,
            name="chat_session_status",
            native_enum=False,
            length=16,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=SessionState.ACTIVE,
    )
    last_accessed: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )

    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChatMessageModel.seq",
    )

    @property
    def active(self) -> bool:
        return self.status == SessionState.ACTIVE
