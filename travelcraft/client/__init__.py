"""
Client-side session liveness and authentication for the Travel Craft API.

Both managers take an ``httpx.AsyncClient`` whose ``base_url`` points at the
API prefix (e.g. ``http://localhost:5000/api``); the client's cookie jar
carries the session cookie.
"""

from .auth_manager import AuthManager, AuthResult, UserProfile
from .errors import NetworkError, ServerUnavailableError, TransientAuthError
from .session_manager import (
    ACTIVITY_EVENTS,
    HEARTBEAT_INTERVAL_SECONDS,
    IDLE_CEILING_SECONDS,
    HeartbeatTicket,
    SessionManager,
    SessionState,
)

__all__ = [
    "AuthManager",
    "AuthResult",
    "UserProfile",
    "NetworkError",
    "ServerUnavailableError",
    "TransientAuthError",
    "ACTIVITY_EVENTS",
    "HEARTBEAT_INTERVAL_SECONDS",
    "IDLE_CEILING_SECONDS",
    "HeartbeatTicket",
    "SessionManager",
    "SessionState",
]
