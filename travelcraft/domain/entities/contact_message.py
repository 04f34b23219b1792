"""
ContactMessage Entity

Message submitted through the public contact form.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from travelcraft.domain.base import utcnow


class ContactMessage(SQLModel, table=True):
    __tablename__ = "contact_messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    subject: str = Field(max_length=255)
    message: str

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
