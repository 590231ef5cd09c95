"""
Session domain models and schemas.

Request/response schemas for chat session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import ConfigDict, Field, StrictBool

from legalaid.models.common import CamelModel

LanguageCode = Literal["en", "tw", "ee", "dag"]


class SessionContextPatch(CamelModel):
    """
    Context keys sent by a client.

    The known keys are type-checked; any other key is carried through as is.
    """

    model_config = ConfigDict(extra="allow")

    legal_topic: str | None = None
    user_location: str | None = None
    resolved: StrictBool | None = None
    request_detail: bool | None = None

    def as_context(self) -> dict[str, Any]:
        """Keys the client actually sent, in their camelCase wire form."""
        values = self.model_dump(by_alias=True, exclude_unset=True)
        values.update(self.model_extra or {})
        return values


class CreateSessionRequest(CamelModel):
    """Request schema for creating a chat session."""

    name: str | None = Field(default=None, max_length=100, description="Optional display name")
    context: SessionContextPatch = Field(default_factory=SessionContextPatch, description="Initial session context")


class CreateSessionResponse(CamelModel):
    success: bool = True
    session_id: str
    message: str = "Chat session created successfully"


class UpdateSessionRequest(CamelModel):
    """Partial session update; omitted fields are left unchanged."""

    context: SessionContextPatch | None = Field(default=None, description="Keys to merge into context")
    active: StrictBool | None = Field(default=None, description="New active flag")
    name: str | None = Field(default=None, max_length=100)


class UpdateSessionResponse(CamelModel):
    success: bool = True
    session_id: str
    context: dict[str, Any]
    active: bool
    message: str = "Session updated successfully"


class DeleteSessionRequest(CamelModel):
    confirm_delete: StrictBool = Field(default=True, description="Must be true")


class SessionSummary(CamelModel):
    """One entry of a session listing."""

    session_id: str
    name: str
    context: dict[str, Any]
    last_accessed: datetime
    active: bool
    created_at: datetime
    message_count: int


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class SessionListResponse(CamelModel):
    success: bool = True
    sessions: list[SessionSummary]
    pagination: Pagination
