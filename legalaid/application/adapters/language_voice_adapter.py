"""
Language and voice adapter.

Translation, speech-to-text and text-to-speech over the GhanaNLP provider,
each with its own content-addressed cache namespace and TTL.

Dependencies: legalaid.boundary.nlp, legalaid.boundary.cache, legalaid.configs
System role: Language services used by the chat pipeline and the NLP endpoints
"""

import asyncio
import base64
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

from legalaid.boundary.cache.nlp_cache import (
    NLPCache,
    asr_key,
    translation_key,
    tts_key,
    tts_metadata_key,
)
from legalaid.boundary.nlp.ghana_nlp_client import GhanaNLPClient
from legalaid.configs.nlp import NLPSettings
from legalaid.core.exceptions import UnsupportedLanguageError, UpstreamUnavailableError, ValidationError

logger = logging.getLogger(__name__)

TRANSLATION_ENGINE = "ghananlp_translation_v1"
ASR_ENGINE = "ghananlp_asr_v2"
# Provider returns no score.
PROVIDER_CONFIDENCE = 0.9
TTS_METADATA_TTL = 6 * 3600

TRANSLATION_LANGUAGES: dict[str, str] = {
    "en": "English",
    "tw": "Twi",
    "gaa": "Ga",
    "ee": "Ewe",
    "dag": "Dagbani",
    "fat": "Fante",
    "gur": "Gurene",
    "yo": "Yoruba",
    "ki": "Kikuyu",
    "luo": "Luo",
    "mer": "Kimeru",
}
ASR_LANGUAGES: dict[str, str] = {
    "tw": "Twi",
    "gaa": "Ga",
    "dag": "Dagbani",
    "yo": "Yoruba",
    "ee": "Ewe",
    "ki": "Kikuyu",
    "ha": "Hausa",
}
TTS_LANGUAGES: dict[str, str] = {
    "tw": "Twi",
    "ki": "Kikuyu",
    "ee": "Ewe",
}

LANGUAGE_ALIASES: dict[str, str] = {
    "twi": "tw",
    "ewe": "ee",
    "dagbani": "dag",
    "ga": "gaa",
    "kikuyu": "ki",
}

DEFAULT_SPEAKERS: dict[str, str] = {
    "tw": "twi_speaker_4",
    "ki": "kikuyu_speaker_1",
    "ee": "ewe_speaker_3",
}
FALLBACK_SPEAKERS: dict[str, list[str]] = {
    "tw": [
        "twi_speaker_4",
        "twi_speaker_5",
        "twi_speaker_6",
        "twi_speaker_7",
        "twi_speaker_8",
        "twi_speaker_9",
    ],
    "ki": ["kikuyu_speaker_1", "kikuyu_speaker_5"],
    "ee": ["ewe_speaker_3", "ewe_speaker_4"],
}

SUPPORTED_AUDIO_FORMATS = frozenset(
    {"audio/mpeg", "audio/mp3", "audio/wav", "audio/webm", "audio/ogg"}
)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def normalize_language(code: str, supported: dict[str, str]) -> str | None:
    """
    Map an internal language code or alias to a provider code.

    Returns:
        Provider code, or None if the operation does not support it
    """
    lowered = (code or "").strip().lower()
    mapped = LANGUAGE_ALIASES.get(lowered, lowered)
    return mapped if mapped in supported else None


def _from_cache(result_type, data: dict[str, Any] | None):
    """Rebuild a cached result, treating malformed entries as a miss."""
    if data is None:
        return None
    try:
        return result_type(**{**data, "cached": True})
    except TypeError:
        logger.warning("Discarding malformed %s cache entry", result_type.__name__)
        return None


def parse_translation_payload(payload: Any) -> str:
    """
    Normalize the provider's translation payload to plain text.

    Shapes are tried in order: a bare string, an object with
    ``translationResponse``, an object with ``out``.

    Raises:
        UpstreamUnavailableError: If no known shape matches
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        for key in ("translationResponse", "out"):
            value = payload.get(key)
            if isinstance(value, str):
                return value
    raise UpstreamUnavailableError(
        "Unrecognized translation response shape",
        service="translation",
        details={"payload_type": type(payload).__name__},
    )


@dataclass
class TranslationResult:
    translated_text: str
    source_language: str
    target_language: str
    engine: str
    confidence: float
    timestamp: str = field(default_factory=_now_iso)
    cached: bool = False


@dataclass
class TranscriptionResult:
    text: str
    language: str
    source_language: str
    engine: str = ASR_ENGINE
    timestamp: str = field(default_factory=_now_iso)
    cached: bool = False


@dataclass
class SpeechResult:
    """Synthesized speech; ``audio_data`` is base64-encoded WAV."""

    audio_data: str
    audio_format: str
    language: str
    speaker_id: str
    timestamp: str = field(default_factory=_now_iso)
    cached: bool = False

    @property
    def audio_bytes(self) -> bytes:
        return base64.b64decode(self.audio_data)

    @property
    def data_url(self) -> str:
        return f"data:audio/{self.audio_format};base64,{self.audio_data}"


class LanguageVoiceAdapter:
    """
    Adapter for the three language operations.

    Cache failures never reach callers; provider failures surface as
    UpstreamUnavailableError so each caller can decide whether to degrade.
    """

    def __init__(
        self,
        client: GhanaNLPClient,
        cache: NLPCache,
        settings: NLPSettings | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            client: Provider HTTP client
            cache: Content-addressed result cache
            settings: TTLs and truncation limit (defaults when omitted)
        """
        self.client = client
        self.cache = cache
        self.settings = settings or NLPSettings()

    async def translate(self, text: str, source_lang: str, target_lang: str) -> TranslationResult:
        """
        Translate text between two supported languages.

        Args:
            text: Input text
            source_lang: Source language code or alias
            target_lang: Target language code or alias

        Returns:
            TranslationResult; ``engine="none"`` when no translation was needed

        Raises:
            ValidationError: Empty text
            UnsupportedLanguageError: Unknown language code
            UpstreamUnavailableError: Provider failure or unrecognized payload
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError("Text is required for translation", field="text")

        if source_lang.strip().lower() == target_lang.strip().lower():
            return TranslationResult(
                translated_text=text,
                source_language=source_lang,
                target_language=target_lang,
                engine="none",
                confidence=1.0,
            )

        source = normalize_language(source_lang, TRANSLATION_LANGUAGES)
        if source is None:
            raise UnsupportedLanguageError(source_lang, "translation", field="fromLanguage")
        target = normalize_language(target_lang, TRANSLATION_LANGUAGES)
        if target is None:
            raise UnsupportedLanguageError(target_lang, "translation", field="toLanguage")

        max_chars = self.settings.max_translation_chars
        if len(text) > max_chars:
            logger.warning(
                "Translation input of %d chars truncated to %d",
                len(text),
                max_chars,
            )
            text = text[:max_chars]

        key = translation_key(text, source, target)
        cached = _from_cache(TranslationResult, await self.cache.get(key))
        if cached is not None:
            return cached

        payload = await self.client.translate(text, f"{source}-{target}")
        result = TranslationResult(
            translated_text=parse_translation_payload(payload).strip(),
            source_language=source,
            target_language=target,
            engine=TRANSLATION_ENGINE,
            confidence=PROVIDER_CONFIDENCE,
        )
        await self.cache.set(key, asdict(result), self.settings.translation_cache_ttl)
        return result

    async def speech_to_text(
        self,
        audio: bytes,
        language: str,
        mime_type: str = "audio/mpeg",
    ) -> TranscriptionResult:
        """
        Transcribe recorded speech.

        Args:
            audio: Raw audio bytes
            language: Spoken language code or alias
            mime_type: Content type forwarded to the provider

        Returns:
            TranscriptionResult with trimmed text

        Raises:
            ValidationError: Empty audio
            UnsupportedLanguageError: Language not supported for ASR
            UpstreamUnavailableError: Provider failure
        """
        if not audio:
            raise ValidationError("Audio file is required", field="audio")

        provider_lang = normalize_language(language, ASR_LANGUAGES)
        if provider_lang is None:
            raise UnsupportedLanguageError(language, "asr")

        key = asr_key(audio, provider_lang)
        cached = _from_cache(TranscriptionResult, await self.cache.get(key))
        if cached is not None:
            return cached

        text = await self.client.transcribe(audio, provider_lang, mime_type)
        result = TranscriptionResult(
            text=text.strip(),
            language=provider_lang,
            source_language=language,
        )
        await self.cache.set(key, asdict(result), self.settings.asr_cache_ttl)
        return result

    async def text_to_speech(
        self,
        text: str,
        language: str,
        speaker_id: str | None = None,
    ) -> SpeechResult:
        """
        Synthesize speech for a TTS-capable language.

        Args:
            text: Text to speak
            language: Language code or alias (tw/twi, ee/ewe, ki/kikuyu)
            speaker_id: Provider speaker; the language default when omitted

        Returns:
            SpeechResult with base64 WAV audio

        Raises:
            ValidationError: Empty text
            UnsupportedLanguageError: Language not supported for TTS
            UpstreamUnavailableError: Provider failure
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError("Text is required for speech synthesis", field="text")

        provider_lang = normalize_language(language, TTS_LANGUAGES)
        if provider_lang is None:
            raise UnsupportedLanguageError(language, "tts")
        speaker = speaker_id or DEFAULT_SPEAKERS[provider_lang]

        key = tts_key(text, provider_lang, speaker)
        cached = _from_cache(SpeechResult, await self.cache.get(key))
        if cached is not None:
            return cached

        audio = await self.client.synthesize(text, provider_lang, speaker)
        result = SpeechResult(
            audio_data=base64.b64encode(audio).decode("ascii"),
            audio_format="wav",
            language=provider_lang,
            speaker_id=speaker,
        )
        await self.cache.set(key, asdict(result), self.settings.tts_cache_ttl)
        return result

    async def tts_speakers(self) -> dict[str, Any]:
        """
        Speakers per TTS language, from the provider when reachable.

        Falls back to the known speaker table on provider failure.
        """
        key = tts_metadata_key("speakers")
        cached = await self.cache.get(key)
        if cached is not None:
            return cached

        try:
            speakers = await self.client.list_tts_speakers()
        except UpstreamUnavailableError as e:
            logger.warning("Using fallback TTS speakers: %s", e)
            return dict(FALLBACK_SPEAKERS)

        if not isinstance(speakers, dict) or not speakers:
            return dict(FALLBACK_SPEAKERS)
        await self.cache.set(key, speakers, TTS_METADATA_TTL)
        return speakers

    def supported_languages(self) -> dict[str, list[dict[str, str]]]:
        """Supported languages per operation as ``[{code, name}]`` lists."""

        def as_list(table: dict[str, str]) -> list[dict[str, str]]:
            return [{"code": code, "name": name} for code, name in table.items()]

        return {
            "translation": as_list(TRANSLATION_LANGUAGES),
            "asr": as_list(ASR_LANGUAGES),
            "tts": as_list(TTS_LANGUAGES),
        }

    async def test_connectivity(self) -> dict[str, Any]:
        """
        Probe the provider.

        Only TTS exposes a cheap read endpoint; translation and ASR are
        reported reachable when the client is configured.
        """
        configured = self.client.is_configured
        tts_ok = False
        if configured:
            try:
                await asyncio.wait_for(self.client.list_tts_languages(), timeout=self.settings.timeout_seconds)
                tts_ok = True
            except (UpstreamUnavailableError, asyncio.TimeoutError) as e:
                logger.warning("TTS connectivity probe failed: %s", e)

        return {
            "connected": tts_ok,
            "services": {
                "tts": tts_ok,
                "asr": configured,
                "translation": configured,
            },
            "message": (
                "Ghana NLP APIs are accessible"
                if tts_ok
                else "Some Ghana NLP APIs may be unavailable"
            ),
            "timestamp": _now_iso(),
        }

    @staticmethod
    def is_valid_audio_format(mime_type: str | None) -> bool:
        return (mime_type or "").lower() in SUPPORTED_AUDIO_FORMATS
