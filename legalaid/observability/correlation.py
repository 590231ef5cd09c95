"""
Request correlation ids.

One id is bound per HTTP request and stamped on every log record emitted
while handling it. Tasks started during the request, such as usage
tracking, inherit the id through their copied context. Inbound ids from
``X-Correlation-ID`` are kept only when they are plain tokens.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

NO_CORRELATION_ID = "-"

# Up to 64 chars of letters, digits and . _ : -
_INBOUND_ID = re.compile(r"[A-Za-z0-9][A-Za-z0-9._:-]{0,63}")

_correlation_id: ContextVar[str | None] = ContextVar("legalaid_correlation_id", default=None)


def accept_correlation_id(inbound: str | None) -> str:
    """Return the inbound id if it is a plain token, otherwise a fresh uuid4 hex."""
    if inbound and _INBOUND_ID.fullmatch(inbound):
        return inbound
    return uuid.uuid4().hex


def get_correlation_id() -> str | None:
    """Id bound to the current request, None outside one."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(inbound: str | None = None) -> Iterator[str]:
    """
    Bind a correlation id for the duration of the block.

    Args:
        inbound: Id supplied by the client, if any

    Yields:
        str: The id in effect inside the block
    """
    correlation_id = accept_correlation_id(inbound)
    token = _correlation_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id.reset(token)
