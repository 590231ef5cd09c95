"""Legal knowledge base and keyword matcher."""

from legalaid.core.knowledge.knowledge_base import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    KnowledgeBase,
    LegalTopic,
    ResponseVariants,
    load_default_knowledge_base,
)
from legalaid.core.knowledge.matcher import (
    GENERAL_TOPIC,
    KnowledgeMatcher,
    LegalResponse,
    MatchResult,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "GENERAL_TOPIC",
    "KnowledgeBase",
    "KnowledgeMatcher",
    "LegalResponse",
    "LegalTopic",
    "MatchResult",
    "ResponseVariants",
    "load_default_knowledge_base",
]
