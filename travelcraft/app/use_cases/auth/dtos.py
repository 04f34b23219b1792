"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """Validated intent to create an account"""

    name: str
    email: str
    password: str


class SigninCommand(BaseModel):
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user fields - the only user data sent to clients"""

    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """Response for signup and signin"""

    message: str
    user: UserInfo


class CurrentUserResponse(BaseModel):
    user: UserInfo


class MessageResponse(BaseModel):
    message: str


class HeartbeatResponse(BaseModel):
    authenticated: bool
