"""
User usage counters ORM model.

Dependencies: sqlalchemy, legalaid.boundary.db.base
System role: Per-user query accounting written by the usage tracker
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from legalaid.boundary.db.base import Base, TimestampMixin, UUIDMixin, utcnow


class UserUsageModel(Base, UUIDMixin, TimestampMixin):
    """Total and monthly query counters for one user."""

    __tablename__ = "user_usage"

    user_id: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    total_queries: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    monthly_queries: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_active: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_reset_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
