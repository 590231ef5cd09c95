"""
Content-addressed cache for language provider results.

Keys are derived from a SHA-256 of the inputs, so identical requests hit the
same entry regardless of who sent them.

Dependencies: hashlib, legalaid.boundary.cache.redis_client
System role: Cache for translation, transcription and synthesis results
"""

import hashlib
from typing import Any

from legalaid.boundary.cache.redis_client import RedisCache

TRANSLATION_PREFIX = "translate:"
ASR_PREFIX = "asr:"
TTS_PREFIX = "tts:"
TTS_METADATA_PREFIX = "tts_meta:"


def _sha256(payload: bytes) -> str:
    return hashlib.sha256(payload).hexdigest()


def translation_key(text: str, source_lang: str, target_lang: str) -> str:
    return f"{TRANSLATION_PREFIX}{_sha256(f'{text}|{source_lang}|{target_lang}'.encode('utf-8'))}"


def asr_key(audio: bytes, language: str) -> str:
    return f"{ASR_PREFIX}{language}:{_sha256(audio)}"


def tts_key(text: str, language: str, speaker_id: str) -> str:
    return f"{TTS_PREFIX}{_sha256(f'{text}|{language}|{speaker_id}'.encode('utf-8'))}"


def tts_metadata_key(name: str) -> str:
    return f"{TTS_METADATA_PREFIX}{name}"


class NLPCache:
    """Namespace over RedisCache for provider results. Never raises."""

    def __init__(self, backend: RedisCache) -> None:
        self.backend = backend

    async def get(self, key: str) -> dict[str, Any] | None:
        value = await self.backend.get_json(key)
        return value if isinstance(value, dict) else None

    async def set(self, key: str, value: dict[str, Any], ttl_seconds: int) -> bool:
        return await self.backend.set_json(key, value, ttl_seconds)
