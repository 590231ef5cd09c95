"""
Language service API endpoints.

Routes:
- POST /nlp/translate - Translate text
- POST /nlp/speech-to-text - Transcribe an uploaded recording
- POST /nlp/text-to-speech - Synthesize WAV audio
- GET /nlp/languages - Supported languages per operation
- GET /nlp/tts/languages - TTS languages and speakers
- GET /nlp/health - Provider connectivity

Provider failures surface as 503 here; there is no fallback for a direct request.

Dependencies: legalaid.application.adapters, legalaid.models
System role: NLP HTTP API
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from legalaid.api.deps import get_language_voice_adapter
from legalaid.application.adapters.language_voice_adapter import TTS_LANGUAGES, LanguageVoiceAdapter
from legalaid.core.exceptions import ValidationError
from legalaid.models.nlp import (
    LanguagesData,
    LanguagesResponse,
    NLPHealthData,
    NLPHealthResponse,
    SpeechToTextResponse,
    TextToSpeechRequest,
    TranscriptionData,
    TranslateRequest,
    TranslateResponse,
    TranslationData,
    TTSLanguagesData,
    TTSLanguagesResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nlp", tags=["nlp"])


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
) -> TranslateResponse:
    """Translate text between supported languages."""
    result = await adapter.translate(request.text, request.from_language, request.to_language)
    return TranslateResponse(
        data=TranslationData(
            translated_text=result.translated_text,
            source_language=result.source_language,
            target_language=result.target_language,
            engine=result.engine,
            confidence=result.confidence,
            timestamp=result.timestamp,
            cached=result.cached,
        )
    )


@router.post("/speech-to-text", response_model=SpeechToTextResponse)
async def speech_to_text(
    audio: UploadFile = File(...),
    language: str = Form(default="tw"),
    adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
) -> SpeechToTextResponse:
    """
    Transcribe an uploaded recording.

    Args:
        audio: Recording (mpeg, mp3, wav, webm or ogg)
        language: Spoken language (default Twi)
        adapter: Injected LanguageVoiceAdapter

    Returns:
        SpeechToTextResponse: Transcribed text
    """
    if not adapter.is_valid_audio_format(audio.content_type):
        raise ValidationError(
            f"Unsupported audio format: {audio.content_type}",
            field="audio",
        )
    result = await adapter.speech_to_text(await audio.read(), language, audio.content_type)
    return SpeechToTextResponse(
        data=TranscriptionData(
            transcription=result.text,
            language=result.language,
            source_language=result.source_language,
            engine=result.engine,
            timestamp=result.timestamp,
            cached=result.cached,
        )
    )


@router.post("/text-to-speech")
async def text_to_speech(
    request: TextToSpeechRequest,
    adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
) -> Response:
    """Synthesize speech and return it as ``audio/wav``."""
    result = await adapter.text_to_speech(request.text, request.language, request.speaker_id)
    return Response(
        content=result.audio_bytes,
        media_type="audio/wav",
        headers={
            "Cache-Control": "public, max-age=3600",
            "X-Audio-Language": result.language,
            "X-Speaker-ID": result.speaker_id,
        },
    )


@router.get("/languages", response_model=LanguagesResponse)
async def supported_languages(
    adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
) -> LanguagesResponse:
    languages = adapter.supported_languages()
    return LanguagesResponse(
        data=LanguagesData(
            languages=languages["translation"],
            asr=languages["asr"],
            tts=languages["tts"],
            total=len(languages["translation"]),
            last_updated=datetime.now(timezone.utc).isoformat(),
        )
    )


@router.get("/tts/languages", response_model=TTSLanguagesResponse)
async def tts_languages(
    adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
) -> TTSLanguagesResponse:
    """TTS languages with provider speakers, or the known speaker table."""
    speakers = await adapter.tts_speakers()
    return TTSLanguagesResponse(
        data=TTSLanguagesData(
            languages=dict(TTS_LANGUAGES),
            speakers=speakers,
            last_updated=datetime.now(timezone.utc).isoformat(),
        )
    )


@router.get("/health", response_model=NLPHealthResponse)
async def nlp_health(
    adapter: LanguageVoiceAdapter = Depends(get_language_voice_adapter),
) -> NLPHealthResponse:
    status = await adapter.test_connectivity()
    return NLPHealthResponse(
        data=NLPHealthData(
            status="healthy" if status["connected"] else "degraded",
            services=status["services"],
            message=status["message"],
            timestamp=status["timestamp"],
        )
    )
