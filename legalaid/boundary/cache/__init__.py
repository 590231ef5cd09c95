"""
Cache boundary: degrade-safe Redis wrapper, the chat session mirror and the
language provider result cache.

Dependencies: redis
System role: Optional acceleration layer; correctness never depends on it
"""

from legalaid.boundary.cache.nlp_cache import NLPCache, asr_key, translation_key, tts_key
from legalaid.boundary.cache.redis_client import RedisCache
from legalaid.boundary.cache.session_cache import SESSION_KEY_PREFIX, SessionCache, session_cache_key

__all__ = [
    "NLPCache",
    "RedisCache",
    "SessionCache",
    "SESSION_KEY_PREFIX",
    "asr_key",
    "session_cache_key",
    "translation_key",
    "tts_key",
]
