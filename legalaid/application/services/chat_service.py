"""
Chat service for multilingual legal Q&A.

Orchestrates one chat turn: session validation, knowledge matching, optional
speech synthesis, message persistence, context carry-over, cache refresh and
usage tracking.

Dependencies: legalaid.core.knowledge, legalaid.application.adapters, legalaid.boundary.db
System role: Chat service orchestration layer
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.application.adapters.language_voice_adapter import LanguageVoiceAdapter
from legalaid.application.services.session_service import build_session_summary, ensure_session_access
from legalaid.application.services.usage_service import UsageTracker
from legalaid.boundary.cache.session_cache import SessionCache
from legalaid.boundary.db.CRUD.chat_message_crud import chat_message_crud
from legalaid.boundary.db.CRUD.chat_session_crud import chat_session_crud
from legalaid.boundary.db.models import ChatMessageModel
from legalaid.core.exceptions import (
    PersistenceError,
    SessionNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from legalaid.core.identity import Caller
from legalaid.core.knowledge import DEFAULT_LANGUAGE, GENERAL_TOPIC, KnowledgeMatcher
from legalaid.observability.log_utils import log_session_event

logger = logging.getLogger(__name__)


@dataclass
class QueryOutcome:
    """Result of one chat turn."""

    user_message: ChatMessageModel
    assistant_message: ChatMessageModel
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def session_context(self) -> dict[str, Any]:
        """Snapshot returned to the client alongside the reply."""
        return {
            "legalTopic": self.context.get("legalTopic"),
            "resolved": self.context.get("resolved"),
        }


class ChatService:
    """
    Chat service for legal Q&A.

    The Knowledge Matcher is the only hard dependency of a turn; speech
    synthesis and transcription are best-effort decorations.
    """

    def __init__(
        self,
        db: AsyncSession,
        matcher: KnowledgeMatcher,
        voice_adapter: LanguageVoiceAdapter,
        session_cache: SessionCache,
        usage_tracker: UsageTracker,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for database operations
            matcher: Knowledge matcher producing replies
            voice_adapter: Translation/ASR/TTS adapter
            session_cache: Session summary mirror
            usage_tracker: Out-of-band usage counter dispatcher
        """
        self.db = db
        self.matcher = matcher
        self.voice_adapter = voice_adapter
        self.session_cache = session_cache
        self.usage_tracker = usage_tracker

    async def process_query(
        self,
        caller: Caller,
        session_id: str,
        content: str,
        language: str,
        context: dict[str, Any] | None = None,
        is_voice_input: bool = False,
        audio_url: str | None = None,
    ) -> QueryOutcome:
        """
        Process one user query through the full chat flow.

        Flow:
        1. Load session and check ownership
        2. Append the user message
        3. Generate the reply against session context plus caller context
        4. Synthesize speech for non-English replies (best effort)
        5. Append the assistant message
        6. Merge caller context and the identified topic into session context
        7. Commit, refresh the cache mirror, dispatch usage tracking

        Args:
            caller: Requesting caller
            session_id: External session token
            content: Query text
            language: Language of the query and the reply
            context: Context keys to merge into the session
            is_voice_input: Whether the query came from a recording
            audio_url: Reference to the recording, kept on voice input only

        Returns:
            QueryOutcome: Stored messages and the merged context

        Raises:
            ValidationError: Empty content
            SessionNotFoundError: Unknown session
            SessionForbiddenError: Caller does not own the session
            PersistenceError: Commit failed
        """
        content = (content or "").strip()
        if not content:
            raise ValidationError("Message content cannot be empty", field="content")

        chat_session = await chat_session_crud.get_by_session_id(self.db, session_id)
        if chat_session is None:
            raise SessionNotFoundError(session_id)
        ensure_session_access(chat_session, caller)

        user_message = await chat_message_crud.append(
            self.db,
            chat_session.id,
            role="user",
            content=content,
            language=language,
            audio_url=audio_url if is_voice_input else None,
        )

        working_context = {**(chat_session.context or {}), **(context or {})}
        reply = self.matcher.generate_legal_response(content, language, working_context)

        reply_audio = None
        if language != DEFAULT_LANGUAGE:
            reply_audio = await self._synthesize(reply.content, language)

        assistant_message = await chat_message_crud.append(
            self.db,
            chat_session.id,
            role="assistant",
            content=reply.content,
            language=reply.language,
            audio_url=reply_audio,
            metadata={
                "legalTopic": reply.legal_topic,
                "confidence": reply.confidence,
                "relatedTopics": reply.related_topics,
                "matchedKeywords": reply.matched_keywords,
            },
        )

        patch = dict(context or {})
        if reply.legal_topic != GENERAL_TOPIC:
            patch["legalTopic"] = reply.legal_topic
        if patch:
            merged = await chat_session_crud.merge_context(self.db, chat_session, patch)
        else:
            merged = dict(chat_session.context or {})
        await chat_session_crud.touch(self.db, chat_session)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError("Failed to persist chat turn", {"error": str(e)}) from e

        log_session_event(
            logger,
            "Chat query processed",
            session_id,
            caller,
            legal_topic=reply.legal_topic,
            language=language,
            has_audio=reply_audio is not None,
        )

        await self.session_cache.set(
            chat_session.session_id,
            build_session_summary(chat_session, last_message=assistant_message),
        )
        self.usage_tracker.dispatch(caller, kind="query")

        return QueryOutcome(
            user_message=user_message,
            assistant_message=assistant_message,
            context=merged,
        )

    async def transcribe_voice_query(
        self,
        audio: bytes,
        language: str,
        mime_type: str = "audio/mpeg",
    ) -> str | None:
        """
        Best-effort transcript of a recorded query.

        Returns:
            Transcribed text, or None when transcription is unavailable
        """
        try:
            result = await self.voice_adapter.speech_to_text(audio, language, mime_type)
        except (UpstreamUnavailableError, ValidationError) as e:
            logger.warning("Voice transcription skipped: %s", e)
            return None
        return result.text or None

    async def _synthesize(self, text: str, language: str) -> str | None:
        try:
            speech = await self.voice_adapter.text_to_speech(text, language)
        except (UpstreamUnavailableError, ValidationError) as e:
            logger.warning("TTS skipped for %s reply: %s", language, e)
            return None
        return speech.data_url
