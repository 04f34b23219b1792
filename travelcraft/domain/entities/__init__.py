"""
Travel Craft Domain Entities

Each entity lives in its own file.
"""

from .user import User
from .session import Session
from .post import Post
from .contact_message import ContactMessage

__all__ = [
    "User",
    "Session",
    "Post",
    "ContactMessage",
]
