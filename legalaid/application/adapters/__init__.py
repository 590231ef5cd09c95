"""Application adapters over boundary services."""

from legalaid.application.adapters.language_voice_adapter import (
    LanguageVoiceAdapter,
    SpeechResult,
    TranscriptionResult,
    TranslationResult,
)

__all__ = [
    "LanguageVoiceAdapter",
    "SpeechResult",
    "TranscriptionResult",
    "TranslationResult",
]
