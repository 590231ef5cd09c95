"""
Chat session API endpoints.

Routes:
- POST /chat/sessions - Create session
- GET /chat/sessions - List the caller's sessions
- GET /chat/sessions/{session_id}/history - Paginated transcript
- PUT /chat/sessions/{session_id} - Merge context, toggle active, rename
- DELETE /chat/sessions/{session_id} - Hard delete

Dependencies: legalaid.application.services.session_service, legalaid.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends, Query

from legalaid.api.deps import get_current_caller, get_session_service
from legalaid.application.services.session_service import SessionService
from legalaid.core.identity import Caller
from legalaid.models.chat import ChatHistoryResponse, ChatMessageResponse, HistoryPagination
from legalaid.models.common import SuccessMessage
from legalaid.models.session import (
    CreateSessionRequest,
    CreateSessionResponse,
    DeleteSessionRequest,
    Pagination,
    SessionListResponse,
    SessionSummary,
    UpdateSessionRequest,
    UpdateSessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat/sessions", tags=["sessions"])


@router.post("", response_model=CreateSessionResponse, status_code=201)
async def create_session(
    request: CreateSessionRequest | None = Body(default=None),
    caller: Caller = Depends(get_current_caller),
    session_service: SessionService = Depends(get_session_service),
) -> CreateSessionResponse:
    """
    Create an empty chat session owned by the caller.

    Args:
        request: Optional name and initial context
        caller: Identity from upstream headers
        session_service: Injected SessionService

    Returns:
        CreateSessionResponse: The new session id
    """
    request = request or CreateSessionRequest()
    chat_session = await session_service.create_session(
        caller,
        context=request.context.as_context(),
        name=request.name,
    )
    return CreateSessionResponse(session_id=chat_session.session_id)


@router.get("", response_model=SessionListResponse)
async def list_sessions(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    active: bool | None = Query(default=None),
    caller: Caller = Depends(get_current_caller),
    session_service: SessionService = Depends(get_session_service),
) -> SessionListResponse:
    """List the caller's sessions, most recently accessed first."""
    result = await session_service.list_sessions(caller, active=active, page=page, limit=limit)
    return SessionListResponse(
        sessions=[
            SessionSummary(
                session_id=item.session.session_id,
                name=item.session.name,
                context=item.session.context or {},
                last_accessed=item.session.last_accessed,
                active=item.session.active,
                created_at=item.session.created_at,
                message_count=item.message_count,
            )
            for item in result.items
        ],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            pages=result.pages,
        ),
    )


@router.get("/{session_id}/history", response_model=ChatHistoryResponse)
async def get_history(
    session_id: str,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    caller: Caller = Depends(get_current_caller),
    session_service: SessionService = Depends(get_session_service),
) -> ChatHistoryResponse:
    """
    Get a page of the session transcript.

    Args:
        session_id: External session token
        limit: Page size (1-100, default 50)
        offset: Messages to skip (default 0)
        caller: Identity from upstream headers
        session_service: Injected SessionService

    Returns:
        ChatHistoryResponse: Messages in append order with pagination
    """
    page = await session_service.get_history(caller, session_id, limit=limit, offset=offset)
    return ChatHistoryResponse(
        session_id=session_id,
        messages=[ChatMessageResponse.from_model(m, include_feedback=True) for m in page.messages],
        pagination=HistoryPagination(
            total=page.total,
            limit=page.limit,
            offset=page.offset,
            has_more=page.has_more,
        ),
        context=page.context,
    )


@router.put("/{session_id}", response_model=UpdateSessionResponse)
async def update_session(
    session_id: str,
    request: UpdateSessionRequest,
    caller: Caller = Depends(get_current_caller),
    session_service: SessionService = Depends(get_session_service),
) -> UpdateSessionResponse:
    """Merge context keys, toggle the active flag or rename a session."""
    chat_session = await session_service.update_session(
        caller,
        session_id,
        context=request.context.as_context() if request.context is not None else None,
        active=request.active,
        name=request.name,
    )
    return UpdateSessionResponse(
        session_id=chat_session.session_id,
        context=chat_session.context or {},
        active=chat_session.active,
    )


@router.delete("/{session_id}", response_model=SuccessMessage)
async def delete_session(
    session_id: str,
    request: DeleteSessionRequest | None = Body(default=None),
    caller: Caller = Depends(get_current_caller),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessMessage:
    """Permanently delete a session and its transcript."""
    confirm = request.confirm_delete if request is not None else True
    await session_service.delete_session(caller, session_id, confirm=confirm)
    return SuccessMessage(message="Chat session deleted successfully")
