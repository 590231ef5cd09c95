"""Tests for the application exception hierarchy."""

from legalaid.core.exceptions import (
    LegalAidException,
    SessionForbiddenError,
    SessionNotFoundError,
    UnsupportedLanguageError,
    UpstreamUnavailableError,
    ValidationError,
)


class TestExceptionHierarchy:
    def test_validation_error_carries_field(self) -> None:
        error = ValidationError("Rating must be between 1 and 5", field="rating")

        assert error.status_code == 400
        assert error.field == "rating"
        assert str(error) == "Rating must be between 1 and 5 | Details: {'field': 'rating'}"

    def test_unsupported_language_is_a_validation_error(self) -> None:
        error = UnsupportedLanguageError("xx", "tts")

        assert isinstance(error, ValidationError)
        assert error.field == "language"
        assert error.details["operation"] == "tts"

    def test_status_codes(self) -> None:
        assert SessionNotFoundError("chat_x").status_code == 404
        assert SessionForbiddenError("chat_x", "u1").status_code == 403
        assert UpstreamUnavailableError("down", service="asr").status_code == 503

    def test_upstream_public_message_does_not_leak_internals(self) -> None:
        error = UpstreamUnavailableError("timeout talking to https://internal:443", service="translation")

        assert error.public_message == "Translation service is temporarily unavailable"
        assert "internal" not in error.public_message

    def test_base_exception_without_details(self) -> None:
        error = LegalAidException("boom")

        assert str(error) == "boom"
        assert error.details == {}
