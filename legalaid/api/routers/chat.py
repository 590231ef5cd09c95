"""
Chat API endpoints.

Routes:
- POST /chat/query - Submit a text query
- POST /chat/voice-query - Submit a recorded query (multipart)
- POST /chat/feedback - Rate a message

Dependencies: legalaid.application.services, legalaid.models
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from legalaid.api.deps import get_chat_service, get_current_caller, get_session_service
from legalaid.application.services.chat_service import ChatService, QueryOutcome
from legalaid.application.services.session_service import SessionService
from legalaid.core.exceptions import ValidationError
from legalaid.core.identity import Caller
from legalaid.models.chat import (
    ChatMessageResponse,
    ChatQueryRequest,
    ChatQueryResponse,
    FeedbackRequest,
    SessionContextSnapshot,
)
from legalaid.models.common import SuccessMessage
from legalaid.models.session import LanguageCode

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def _to_response(outcome: QueryOutcome, transcript: str | None = None) -> ChatQueryResponse:
    return ChatQueryResponse(
        message=ChatMessageResponse.from_model(outcome.assistant_message),
        session_context=SessionContextSnapshot(**outcome.session_context),
        transcript=transcript,
    )


@router.post("/query", response_model=ChatQueryResponse)
async def submit_query(
    request: ChatQueryRequest,
    caller: Caller = Depends(get_current_caller),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatQueryResponse:
    """
    Answer a legal question within a session.

    Args:
        request: Session id, query text, language and optional context
        caller: Identity from upstream headers
        chat_service: Injected ChatService

    Returns:
        ChatQueryResponse: Assistant message and session context snapshot
    """
    outcome = await chat_service.process_query(
        caller,
        request.session_id,
        request.content,
        request.language,
        context=request.context.as_context() if request.context is not None else None,
        is_voice_input=request.is_voice_input,
        audio_url=request.audio_url,
    )
    return _to_response(outcome)


@router.post("/voice-query", response_model=ChatQueryResponse)
async def submit_voice_query(
    session_id: str = Form(..., alias="sessionId", min_length=1),
    language: LanguageCode = Form(...),
    content: str | None = Form(default=None, max_length=2000),
    audio: UploadFile = File(...),
    caller: Caller = Depends(get_current_caller),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatQueryResponse:
    """
    Answer a recorded question.

    The recording is transcribed when possible; when transcription fails the
    typed ``content`` is used instead.
    """
    audio_bytes = await audio.read()
    transcript = await chat_service.transcribe_voice_query(
        audio_bytes,
        language,
        audio.content_type or "audio/mpeg",
    )
    query_text = transcript or (content or "").strip()
    if not query_text:
        raise ValidationError("Message content cannot be empty", field="content")

    outcome = await chat_service.process_query(
        caller,
        session_id,
        query_text,
        language,
        is_voice_input=True,
        audio_url=audio.filename,
    )
    return _to_response(outcome, transcript=transcript)


@router.post("/feedback", response_model=SuccessMessage)
async def submit_feedback(
    request: FeedbackRequest,
    caller: Caller = Depends(get_current_caller),
    session_service: SessionService = Depends(get_session_service),
) -> SuccessMessage:
    """Rate one message; open to any caller."""
    await session_service.submit_feedback(
        caller,
        request.session_id,
        rating=request.rating,
        helpful=request.helpful,
        feedback=request.feedback,
        message_index=request.message_index,
        message_id=request.message_id,
    )
    return SuccessMessage(message="Feedback submitted successfully")
