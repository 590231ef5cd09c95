"""
User usage CRUD operations.

Dependencies: sqlalchemy, legalaid.boundary.db.models
System role: Atomic per-user query counters
"""

from datetime import datetime

from sqlalchemy import case, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from legalaid.boundary.db.base import utcnow
from legalaid.boundary.db.CRUD.base_crud import BaseCRUD
from legalaid.boundary.db.models import UserUsageModel

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UserUsageCRUD(BaseCRUD[UserUsageModel]):
    """CRUD operations for UserUsageModel."""

    def __init__(self) -> None:
        super().__init__(UserUsageModel)

    async def get_by_user_id(self, session: AsyncSession, user_id: str) -> UserUsageModel | None:
        stmt = select(UserUsageModel).where(UserUsageModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def record_query(
        self,
        session: AsyncSession,
        user_id: str,
        now: datetime | None = None,
    ) -> None:
        """
        Increment total and monthly query counters for a user.

        Runs as a single ``INSERT ... ON CONFLICT (user_id) DO UPDATE`` so the
        first query of two concurrent requests cannot collide on the unique
        user id, and increments are applied by the database. The monthly
        counter restarts at 1 when the last reset predates the current
        calendar month.

        Args:
            session: Async database session
            user_id: User whose counters to bump
            now: Clock override for tests

        Raises:
            NotImplementedError: The bound database has no upsert support here
        """
        now = now or utcnow()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        dialect = session.get_bind().dialect.name
        try:
            insert = _UPSERT_INSERTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Usage upsert is not supported on {dialect}") from None

        table = UserUsageModel.__table__
        stmt = insert(table).values(
            user_id=user_id,
            total_queries=1,
            monthly_queries=1,
            last_active=now,
            last_reset_date=now,
        )
        stale = table.c.last_reset_date < month_start
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.user_id],
            set_={
                "total_queries": table.c.total_queries + 1,
                "monthly_queries": case((stale, 1), else_=table.c.monthly_queries + 1),
                "last_reset_date": case((stale, stmt.excluded.last_reset_date), else_=table.c.last_reset_date),
                "last_active": stmt.excluded.last_active,
                # onupdate hooks do not run inside DO UPDATE
                "updated_at": now,
            },
        )
        await session.execute(stmt)


user_usage_crud = UserUsageCRUD()
