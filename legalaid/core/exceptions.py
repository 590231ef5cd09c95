"""
Exception hierarchy for the legal assistant application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LegalAidException(Exception):
    """Base exception for all legal assistant application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(LegalAidException):
    """Raised when input validation fails."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class UnsupportedLanguageError(ValidationError):
    """Raised when a language code is not supported by an operation."""

    def __init__(self, language: str, operation: str, field: str = "language") -> None:
        """
        Initialize unsupported language error.

        Args:
            language: Offending language code
            operation: Operation that rejected it (translation, asr, tts)
            field: Request field carrying the language
        """
        super().__init__(
            f"Language '{language}' is not supported for {operation}",
            field=field,
            details={"language": language, "operation": operation},
        )


class AuthenticationRequiredError(LegalAidException):
    """Raised when an operation needs an authenticated, non-anonymous caller."""

    status_code = 401

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class SessionNotFoundError(LegalAidException):
    """Raised when a chat session cannot be found."""

    status_code = 404

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__("Chat session not found", details)


class MessageNotFoundError(LegalAidException):
    """Raised when a message referenced by id does not exist in a session."""

    status_code = 404

    def __init__(self, session_id: str, message_id: str) -> None:
        super().__init__(
            "Message not found",
            {"session_id": session_id, "message_id": message_id},
        )


class SessionForbiddenError(LegalAidException):
    """Raised when an authenticated caller targets a session owned by someone else."""

    status_code = 403

    def __init__(self, session_id: str, user_id: str | None = None) -> None:
        details = {"session_id": session_id}
        if user_id:
            details["user_id"] = user_id
        super().__init__("Unauthorized access to chat session", details)


class InvalidSessionTransitionError(LegalAidException):
    """Raised when a lifecycle transition is not allowed."""

    status_code = 409

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            f"Cannot move session from {current} to {target}",
            {"current": current, "target": target},
        )


class UpstreamUnavailableError(LegalAidException):
    """Raised when a translation, ASR or TTS provider fails or is not configured."""

    status_code = 503

    def __init__(
        self,
        message: str,
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Internal error message (never sent to clients verbatim)
            service: Provider operation that failed (translation, asr, tts)
            details: Additional context
        """
        details = details or {}
        if service:
            details["service"] = service
        self.service = service
        super().__init__(message, details)

    @property
    def public_message(self) -> str:
        """Generic, non-leaking message for API consumers."""
        label = {
            "translation": "Translation",
            "asr": "Speech recognition",
            "tts": "Speech synthesis",
        }.get(self.service or "", "Language")
        return f"{label} service is temporarily unavailable"


class CacheUnavailableError(LegalAidException):
    """Raised inside the cache wrapper when the backend cannot be reached (never surfaced)."""

    pass


class PersistenceError(LegalAidException):
    """Raised when the database is unreachable or a write fails."""

    status_code = 500
