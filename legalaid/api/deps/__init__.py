"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_current_caller,
    get_knowledge_matcher,
    get_language_voice_adapter,
    get_service_cache,
    get_session_cache,
    get_session_service,
    get_usage_tracker,
)

__all__ = [
    "get_chat_service",
    "get_current_caller",
    "get_knowledge_matcher",
    "get_language_voice_adapter",
    "get_service_cache",
    "get_session_cache",
    "get_session_service",
    "get_usage_tracker",
]
