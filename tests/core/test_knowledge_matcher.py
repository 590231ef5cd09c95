"""
Test suite for KnowledgeMatcher.

Tests topic scoring, tie-breaking, the general fallback, detail selection,
urgent-contact suffixes and language fallback against the bundled knowledge base.

System role: Verification of legal response generation
"""

from types import MappingProxyType

import pytest

from legalaid.core.knowledge import (
    GENERAL_TOPIC,
    KnowledgeBase,
    KnowledgeMatcher,
    LegalTopic,
    ResponseVariants,
    load_default_knowledge_base,
)


def _topic(key: str, keywords: tuple[str, ...]) -> LegalTopic:
    return LegalTopic(
        key=key,
        keywords=keywords,
        responses=MappingProxyType({"en": ResponseVariants(basic=f"{key} basic", detailed=f"{key} detailed")}),
    )


def _knowledge_base(*topics: LegalTopic) -> KnowledgeBase:
    return KnowledgeBase(
        topics=topics,
        general_responses=MappingProxyType({"en": "general reply"}),
        emergency_contacts=MappingProxyType({"en": MappingProxyType({"legal_aid": "Legal Aid"})}),
        urgent_contact_messages=MappingProxyType({"en": "Contact"}),
    )


class TestMatch:
    """Test suite for KnowledgeMatcher.match()."""

    def test_match_should_score_by_keyword_fraction(self, matcher: KnowledgeMatcher) -> None:
        result = matcher.match("My landlord wants to evict me")

        assert result.topic == "tenant_rights"
        assert result.confidence == pytest.approx(2 / 8)
        assert set(result.matched_keywords) == {"landlord", "evict"}

    def test_match_should_be_case_insensitive(self, matcher: KnowledgeMatcher) -> None:
        assert matcher.match("LANDLORD and RENT").topic == "tenant_rights"

    def test_match_should_prefer_higher_fraction_across_topics(self, matcher: KnowledgeMatcher) -> None:
        """'custody' is in both police (8 keywords) and divorce (7 keywords) topics."""
        result = matcher.match("custody")

        assert result.topic == "divorce"
        assert result.confidence == pytest.approx(1 / 7)

    def test_match_should_break_ties_by_declaration_order(self) -> None:
        kb = _knowledge_base(_topic("first", ("alpha", "beta")), _topic("second", ("alpha", "gamma")))

        result = KnowledgeMatcher(kb).match("alpha")

        assert result.topic == "first"

    def test_match_should_fall_back_to_general_below_threshold(self) -> None:
        keywords = tuple(f"kw{i}" for i in range(11))
        kb = _knowledge_base(_topic("wide", keywords))

        result = KnowledgeMatcher(kb).match("kw0 only")

        assert result.topic == GENERAL_TOPIC
        assert result.confidence == pytest.approx(0.1)
        assert result.is_general

    def test_match_should_return_general_when_nothing_matches(self, matcher: KnowledgeMatcher) -> None:
        result = matcher.match("hello there")

        assert result.topic == GENERAL_TOPIC
        assert result.matched_keywords == ()


class TestGenerateLegalResponse:
    """Test suite for KnowledgeMatcher.generate_legal_response()."""

    def test_general_reply_should_list_every_topic(self, matcher: KnowledgeMatcher) -> None:
        kb = load_default_knowledge_base()

        response = matcher.generate_legal_response("hello there", "en")

        assert response.legal_topic == GENERAL_TOPIC
        assert response.confidence == pytest.approx(0.1)
        assert response.content == kb.general_response("en")
        assert response.related_topics == list(kb.topic_keys)

    def test_basic_variant_without_detail_trigger(self, matcher: KnowledgeMatcher) -> None:
        kb = load_default_knowledge_base()
        variants = kb.get_topic("tenant_rights").responses_for("en")

        response = matcher.generate_legal_response("My landlord wants to evict me", "en")

        assert response.content == variants.basic
        assert response.related_topics == ["land_registration", "worker_rights"]

    def test_detailed_variant_on_trigger_word(self, matcher: KnowledgeMatcher) -> None:
        kb = load_default_knowledge_base()
        variants = kb.get_topic("tenant_rights").responses_for("en")

        response = matcher.generate_legal_response("Explain my rent agreement with the landlord", "en")

        assert response.content == variants.detailed

    def test_detailed_variant_when_context_requests_detail(self, matcher: KnowledgeMatcher) -> None:
        kb = load_default_knowledge_base()
        variants = kb.get_topic("tenant_rights").responses_for("en")

        response = matcher.generate_legal_response(
            "landlord rent",
            "en",
            context={"requestDetail": True},
        )

        assert response.content == variants.detailed

    def test_topic_without_translation_should_answer_in_english(self) -> None:
        matcher = KnowledgeMatcher(_knowledge_base(_topic("rent", ("rent",))))

        response = matcher.generate_legal_response("rent", "tw")

        assert response.legal_topic == "rent"
        assert response.content == "rent basic"
        assert response.language == "tw"

    def test_general_reply_without_translation_should_answer_in_english(self) -> None:
        matcher = KnowledgeMatcher(_knowledge_base(_topic("rent", ("rent",))))

        response = matcher.generate_legal_response("hello", "ee")

        assert response.content == "general reply"
        assert response.language == "ee"

    def test_reply_should_use_requested_language(self, matcher: KnowledgeMatcher) -> None:
        kb = load_default_knowledge_base()
        variants = kb.get_topic("land_registration").responses_for("tw")

        response = matcher.generate_legal_response("land title deed", "tw")

        assert response.language == "tw"
        assert response.content == variants.basic

    def test_urgent_query_should_append_one_contact(self, matcher: KnowledgeMatcher) -> None:
        response = matcher.generate_legal_response("The police arrest my brother", "en")

        assert response.legal_topic == "police_rights"
        assert response.content.endswith(
            "\n\nFor immediate assistance, contact: Police Emergency: 191 or 18555"
        )

    def test_non_urgent_query_should_not_append_contact(self, matcher: KnowledgeMatcher) -> None:
        response = matcher.generate_legal_response("landlord rent", "en")

        assert "For immediate assistance" not in response.content

    def test_generation_should_be_deterministic(self, matcher: KnowledgeMatcher) -> None:
        first = matcher.generate_legal_response("worker salary overtime", "ee")
        second = matcher.generate_legal_response("worker salary overtime", "ee")

        assert first == second


class TestEmergencyContacts:
    """Test suite for urgency detection and contact selection."""

    @pytest.mark.parametrize("query", ["URGENT please", "there is violence", "I need help"])
    def test_is_urgent_should_detect_distress_words(self, query: str) -> None:
        assert KnowledgeMatcher.is_urgent(query)

    def test_is_urgent_should_ignore_calm_queries(self) -> None:
        assert not KnowledgeMatcher.is_urgent("land registration fees")

    def test_contact_rules_should_apply_in_order(self, matcher: KnowledgeMatcher) -> None:
        contact = matcher.relevant_emergency_contact("police violence", "en")

        assert contact == "Police Emergency: 191 or 18555"

    def test_contact_should_fall_back_to_legal_aid(self, matcher: KnowledgeMatcher) -> None:
        assert matcher.relevant_emergency_contact("urgent", "en") == "Legal Aid Board: +233 302 663568"

    def test_contact_language_should_fall_back_to_english(self, matcher: KnowledgeMatcher) -> None:
        contact = matcher.relevant_emergency_contact("abuse at home", "ee")

        assert contact == "Domestic Violence Hotline: 055 222 2800"

    def test_contacts_should_be_localized_when_available(self, matcher: KnowledgeMatcher) -> None:
        assert matcher.emergency_contacts("tw")["ambulance"] == "Ambulane: 193"

    def test_available_topics_should_follow_declaration_order(self, matcher: KnowledgeMatcher) -> None:
        assert matcher.available_topics() == [
            "tenant_rights",
            "land_registration",
            "police_rights",
            "divorce",
            "worker_rights",
        ]
