"""
Structured logging helpers for chat session events and failures.

Extras are flattened to short strings before they reach the record: audio
payloads become a byte count, collections become a size and long text such
as user queries or provider error bodies is cut at ``MAX_VALUE_LENGTH``.

Dependencies: logging (stdlib), legalaid.core.identity
System role: Logging helper functions
"""

import logging
from typing import Any

from legalaid.core.identity import Caller

MAX_VALUE_LENGTH = 200


def loggable(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """Render one extra value as a bounded string."""
    if value is None:
        return "-"
    if isinstance(value, (bytes, bytearray)):
        text = f"<{len(value)} bytes>"
    elif isinstance(value, (list, tuple, set, dict)):
        text = f"<{type(value).__name__} of {len(value)}>"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def caller_label(caller: Caller) -> str:
    """``user:<id>`` for registered callers, ``guest:<id>`` or ``anonymous`` otherwise."""
    if caller.id is None:
        return "anonymous"
    kind = "guest" if caller.is_anonymous else "user"
    return f"{kind}:{caller.id}"


def log_session_event(
    logger: logging.Logger,
    message: str,
    session_id: str,
    caller: Caller,
    level: int = logging.INFO,
    **details: Any,
) -> None:
    """
    Log something that happened to a chat session.

    Args:
        logger: Logger instance
        message: Log message
        session_id: External session token
        caller: Caller that triggered the event
        level: Log level
        **details: Further extras, flattened with ``loggable``
    """
    extra = {key: loggable(value) for key, value in details.items()}
    extra["session_id"] = session_id
    extra["caller"] = caller_label(caller)
    logger.log(level, message, extra=extra)


def log_failure(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **details: Any,
) -> None:
    """Log an exception with its type, its bounded message and the given extras."""
    extra = {key: loggable(value) for key, value in details.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = loggable(exc)
    logger.exception(message, extra=extra)
