"""
Language service schemas.

Request/response schemas for translation, speech-to-text and text-to-speech.

Dependencies: pydantic
System role: NLP API contracts
"""

from typing import Any

from pydantic import Field

from legalaid.models.common import CamelModel


class TranslateRequest(CamelModel):
    text: str = Field(min_length=1, description="Text to translate")
    from_language: str = Field(min_length=1)
    to_language: str = Field(min_length=1)


class TranslationData(CamelModel):
    translated_text: str
    source_language: str
    target_language: str
    engine: str
    confidence: float
    timestamp: str
    cached: bool = False


class TranslateResponse(CamelModel):
    success: bool = True
    data: TranslationData


class TranscriptionData(CamelModel):
    transcription: str
    language: str
    source_language: str
    engine: str
    timestamp: str
    cached: bool = False


class SpeechToTextResponse(CamelModel):
    success: bool = True
    data: TranscriptionData


class TextToSpeechRequest(CamelModel):
    text: str = Field(min_length=1, max_length=2000)
    language: str = Field(default="tw")
    speaker_id: str | None = None


class LanguageEntry(CamelModel):
    code: str
    name: str


class LanguagesData(CamelModel):
    languages: list[LanguageEntry]
    asr: list[LanguageEntry]
    tts: list[LanguageEntry]
    total: int
    last_updated: str


class LanguagesResponse(CamelModel):
    success: bool = True
    data: LanguagesData


class TTSLanguagesData(CamelModel):
    languages: dict[str, str]
    speakers: dict[str, Any]
    last_updated: str


class TTSLanguagesResponse(CamelModel):
    success: bool = True
    data: TTSLanguagesData


class NLPHealthData(CamelModel):
    status: str
    services: dict[str, bool]
    message: str
    timestamp: str


class NLPHealthResponse(CamelModel):
    success: bool = True
    data: NLPHealthData
