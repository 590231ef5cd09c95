"""
Test suite for UsageTracker.

System role: Verification of out-of-band usage accounting
"""

import logging
from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.application.services.usage_service import UsageTracker
from legalaid.boundary.db.CRUD.user_usage_crud import user_usage_crud
from legalaid.core.identity import ANONYMOUS, Caller


class TestTrack:
    @pytest.mark.asyncio
    async def test_track_should_commit_on_its_own_session(
        self, session_factory, test_async_db: AsyncSession
    ) -> None:
        tracker = UsageTracker(session_factory)

        assert await tracker.track("user-1") is True
        assert await tracker.track("user-1") is True

        usage = await user_usage_crud.get_by_user_id(test_async_db, "user-1")
        assert usage.total_queries == 2

    @pytest.mark.asyncio
    async def test_track_failure_should_be_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        broken_factory = MagicMock(side_effect=RuntimeError("pool exhausted"))
        tracker = UsageTracker(broken_factory)

        with caplog.at_level(logging.ERROR):
            assert await tracker.track("user-1") is False

        assert "Usage tracking failed" in caplog.text


class TestDispatch:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("caller", [ANONYMOUS, Caller(id="guest-7", is_anonymous=True)])
    async def test_dispatch_should_skip_unregistered_callers(self, session_factory, caller: Caller) -> None:
        tracker = UsageTracker(session_factory)

        assert tracker.dispatch(caller) is None

    @pytest.mark.asyncio
    async def test_dispatch_should_run_in_background(self, session_factory, test_async_db: AsyncSession) -> None:
        tracker = UsageTracker(session_factory)

        task = tracker.dispatch(Caller(id="user-9", is_anonymous=False))
        await tracker.drain()

        assert task is not None and task.done()
        assert task.result() is True
        usage = await user_usage_crud.get_by_user_id(test_async_db, "user-9")
        assert usage.monthly_queries == 1

    @pytest.mark.asyncio
    async def test_drain_without_tasks(self, session_factory) -> None:
        await UsageTracker(session_factory).drain()
