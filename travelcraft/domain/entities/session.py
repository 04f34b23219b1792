"""
Session Entity

Server-held record correlating a cookie-carried opaque id with an optional
signed-in user and a rolling expiry.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from travelcraft.domain.base import generate_session_id, utcnow


class Session(SQLModel, table=True):
    """
    Session entity - one row per browser session.

    Business Rules:
    - A session without user_id is anonymous and never authenticated
    - Every touch sets expires_at = last_accessed_at + inactivity window
    - Expired rows are treated as missing and removed by the sweep
    """

    __tablename__ = "sessions"

    id: str = Field(default_factory=generate_session_id, primary_key=True, max_length=64)

    user_id: Optional[UUID] = Field(default=None, index=True)
    user_email: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_accessed_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def touch(self, now: datetime, window: timedelta) -> None:
        self.last_accessed_at = now
        self.expires_at = now + window

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
