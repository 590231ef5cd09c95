"""
Usage tracker.

Bumps per-user query counters as a fire-and-forget task on its own database
session, after the request's own transaction has committed. Failures are
logged and never reach the request.

Dependencies: asyncio, sqlalchemy, legalaid.boundary.db
System role: Out-of-band usage accounting
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from legalaid.boundary.db.CRUD.user_usage_crud import user_usage_crud
from legalaid.core.identity import Caller
from legalaid.observability.log_utils import log_failure

logger = logging.getLogger(__name__)


class UsageTracker:
    """Dispatches usage increments as independent asyncio tasks."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize tracker.

        Args:
            session_factory: Factory for the tracker's own database sessions
        """
        self.session_factory = session_factory
        self._tasks: set[asyncio.Task] = set()

    async def track(self, user_id: str, kind: str = "query") -> bool:
        """
        Record one usage event.

        Returns:
            True if the counters were updated, False if the update failed
        """
        try:
            async with self.session_factory() as db:
                await user_usage_crud.record_query(db, user_id)
                await db.commit()
        except Exception as e:
            log_failure(
                logger,
                "Usage tracking failed",
                e,
                user_id=user_id,
                kind=kind,
            )
            return False
        return True

    def dispatch(self, caller: Caller, kind: str = "query") -> asyncio.Task | None:
        """
        Schedule ``track`` without awaiting it.

        Anonymous and unauthenticated callers are skipped.

        Returns:
            The scheduled task, or None when skipped
        """
        if not caller.is_registered:
            return None
        task = asyncio.create_task(self.track(caller.id, kind))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for in-flight tracking tasks (shutdown and tests)."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
