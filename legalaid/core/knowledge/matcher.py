"""
Keyword matcher over the legal knowledge base.

Scores a free-text query against each topic by keyword overlap, picks the
reply variant and appends an emergency contact for urgent queries.

Dependencies: legalaid.core.knowledge.knowledge_base
System role: Legal response generation for chat turns
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from legalaid.core.knowledge.knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)

GENERAL_TOPIC = "general"
GENERAL_CONFIDENCE = 0.1
MATCH_THRESHOLD = 0.1

DETAIL_TRIGGERS: tuple[str, ...] = ("explain", "detail", "step", "how", "what")
URGENT_KEYWORDS: tuple[str, ...] = (
    "emergency",
    "urgent",
    "arrest",
    "police",
    "help",
    "now",
    "immediately",
    "violence",
    "abuse",
)

# First matching rule wins.
CONTACT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("police", "arrest"), "police"),
    (("ambulance", "medical"), "ambulance"),
    (("fire",), "fire"),
    (("violence", "abuse"), "domestic_violence"),
    (("rights",), "human_rights"),
)
FALLBACK_CONTACT = "legal_aid"


@dataclass(frozen=True)
class MatchResult:
    """Best topic for a query."""

    topic: str
    confidence: float
    matched_keywords: tuple[str, ...] = ()

    @property
    def is_general(self) -> bool:
        return self.topic == GENERAL_TOPIC


@dataclass(frozen=True)
class LegalResponse:
    """Assistant reply produced for one query."""

    content: str
    language: str
    legal_topic: str
    confidence: float
    related_topics: list[str] = field(default_factory=list)
    matched_keywords: list[str] = field(default_factory=list)


class KnowledgeMatcher:
    """
    Keyword-overlap matcher.

    Deterministic: topics are scanned in declaration order and only a strictly
    higher score replaces the current best.
    """

    def __init__(self, knowledge_base: KnowledgeBase) -> None:
        """
        Initialize matcher.

        Args:
            knowledge_base: Read-only topic registry
        """
        self.knowledge_base = knowledge_base

    def match(self, query: str) -> MatchResult:
        """
        Find the best matching topic for a query.

        Args:
            query: Free-text user query

        Returns:
            MatchResult: Winning topic, or "general" when the best score is below 0.1
        """
        lower_query = query.lower()
        best_topic: str | None = None
        best_score = 0.0
        best_keywords: tuple[str, ...] = ()

        for topic in self.knowledge_base.topics:
            matched = tuple(kw for kw in topic.keywords if kw.lower() in lower_query)
            score = len(matched) / len(topic.keywords) if topic.keywords else 0.0
            if score > best_score:
                best_topic = topic.key
                best_score = score
                best_keywords = matched

        if best_topic is None or best_score < MATCH_THRESHOLD:
            return MatchResult(topic=GENERAL_TOPIC, confidence=GENERAL_CONFIDENCE)

        return MatchResult(topic=best_topic, confidence=best_score, matched_keywords=best_keywords)

    def generate_legal_response(
        self,
        query: str,
        language: str,
        context: Mapping[str, Any] | None = None,
    ) -> LegalResponse:
        """
        Build the assistant reply for a query.

        Args:
            query: Free-text user query
            language: Requested response language (echoed on the result)
            context: Session context; a truthy ``requestDetail`` forces the detailed variant

        Returns:
            LegalResponse: Reply content with topic, confidence and related topics
        """
        context = context or {}
        lower_query = query.lower()
        result = self.match(query)

        if result.is_general:
            return LegalResponse(
                content=self.knowledge_base.general_response(language),
                language=language,
                legal_topic=GENERAL_TOPIC,
                confidence=GENERAL_CONFIDENCE,
                related_topics=list(self.knowledge_base.topic_keys),
            )

        topic = self.knowledge_base.get_topic(result.topic)
        variants = topic.responses_for(language)

        wants_detail = self.wants_detail(lower_query) or bool(context.get("requestDetail"))
        content = variants.detailed if wants_detail and variants.detailed else variants.basic

        if self.is_urgent(lower_query):
            contact = self.relevant_emergency_contact(lower_query, language)
            content = f"{content}\n\n{self.knowledge_base.urgent_message(language)}: {contact}"

        logger.debug(
            "Matched legal topic",
            extra={
                "legal_topic": result.topic,
                "confidence": result.confidence,
                "detailed": wants_detail,
            },
        )

        return LegalResponse(
            content=content,
            language=language,
            legal_topic=result.topic,
            confidence=result.confidence,
            related_topics=list(topic.related_topics),
            matched_keywords=list(result.matched_keywords),
        )

    @staticmethod
    def wants_detail(lower_query: str) -> bool:
        return any(trigger in lower_query for trigger in DETAIL_TRIGGERS)

    @staticmethod
    def is_urgent(query: str) -> bool:
        """Whether the query contains a distress keyword."""
        lower_query = query.lower()
        return any(keyword in lower_query for keyword in URGENT_KEYWORDS)

    def relevant_emergency_contact(self, query: str, language: str) -> str:
        """
        Pick the single most relevant emergency contact line.

        Args:
            query: User query
            language: Contact language (falls back to English)

        Returns:
            str: Contact line
        """
        lower_query = query.lower()
        contacts = self.knowledge_base.contacts_for(language)
        for triggers, contact_key in CONTACT_RULES:
            if any(trigger in lower_query for trigger in triggers):
                return contacts[contact_key]
        return contacts[FALLBACK_CONTACT]

    def available_topics(self) -> list[str]:
        return list(self.knowledge_base.topic_keys)

    def emergency_contacts(self, language: str) -> dict[str, str]:
        return dict(self.knowledge_base.contacts_for(language))
