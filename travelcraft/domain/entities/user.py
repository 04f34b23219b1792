"""
User Entity

Represents a traveller who can sign in and own trip posts.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from travelcraft.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - account used to sign in.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - Only id, name and email are ever returned to clients
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def public_view(self) -> dict:
        return {"id": str(self.id), "name": self.name, "email": self.email}
