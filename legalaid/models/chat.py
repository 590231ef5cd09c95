"""
Chat domain models and schemas.

Request/response schemas for chat queries, history and feedback.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import Field, StrictBool, model_validator

from legalaid.models.common import CamelModel
from legalaid.models.session import LanguageCode, SessionContextPatch


class ChatQueryRequest(CamelModel):
    """Request schema for a chat query."""

    session_id: str = Field(min_length=1, description="Target chat session")
    content: str = Field(min_length=1, max_length=2000, description="User question")
    language: LanguageCode = Field(description="Query and reply language")
    context: SessionContextPatch | None = Field(default=None, description="Context keys to merge")
    is_voice_input: bool = Field(default=False, description="Query came from a recording")
    audio_url: str | None = Field(default=None, description="Reference to the recording")


class FeedbackEntryResponse(CamelModel):
    rating: int
    helpful: bool
    feedback: str | None = None
    timestamp: datetime


class ChatMessageResponse(CamelModel):
    """Single chat message."""

    message_id: uuid.UUID
    role: str = Field(description="Message role: 'user' or 'assistant'")
    content: str
    language: str
    timestamp: datetime
    audio_url: str | None = None
    metadata: dict[str, Any] | None = None
    feedback: list[FeedbackEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_model(cls, message, include_feedback: bool = False) -> "ChatMessageResponse":
        """Build from a ChatMessageModel row."""
        feedback = []
        if include_feedback:
            feedback = [
                FeedbackEntryResponse(
                    rating=entry.rating,
                    helpful=entry.helpful,
                    feedback=entry.feedback,
                    timestamp=entry.timestamp,
                )
                for entry in message.feedback
            ]
        return cls(
            message_id=message.message_id,
            role=message.role,
            content=message.content,
            language=message.language,
            timestamp=message.timestamp,
            audio_url=message.audio_url,
            metadata=message.message_metadata,
            feedback=feedback,
        )


class SessionContextSnapshot(CamelModel):
    legal_topic: str | None = None
    resolved: bool | None = None


class ChatQueryResponse(CamelModel):
    """Response schema for a chat query."""

    success: bool = True
    message: ChatMessageResponse
    session_context: SessionContextSnapshot
    transcript: str | None = Field(default=None, description="Transcript of a voice query")


class HistoryPagination(CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class ChatHistoryResponse(CamelModel):
    """Response schema for chat history."""

    success: bool = True
    session_id: str
    messages: list[ChatMessageResponse]
    pagination: HistoryPagination
    context: dict[str, Any]


class FeedbackRequest(CamelModel):
    """Feedback on one message, addressed by index or by id."""

    session_id: str = Field(min_length=1)
    message_index: int | None = Field(default=None, ge=0, description="Zero-based position")
    message_id: uuid.UUID | None = Field(default=None, description="Stable message id")
    rating: int = Field(ge=1, le=5)
    feedback: str | None = Field(default=None, max_length=500)
    helpful: StrictBool

    @model_validator(mode="after")
    def require_message_reference(self) -> "FeedbackRequest":
        if self.message_index is None and self.message_id is None:
            raise ValueError("Either messageIndex or messageId is required")
        return self
