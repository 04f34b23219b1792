"""
Client Auth Manager

Wraps the sign-in/up/out and who-am-I calls and keeps the signed-in user in
step with the Session Manager, which owns the authoritative session state.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .errors import NetworkError, ServerUnavailableError, TransientAuthError
from .session_manager import SessionManager, SessionState

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."


@dataclass
class UserProfile:
    id: str
    name: str
    email: str

    @classmethod
    def from_payload(cls, payload: dict) -> "UserProfile":
        return cls(id=str(payload["id"]), name=payload["name"], email=payload["email"])


@dataclass
class AuthResult:
    success: bool
    user: Optional[UserProfile] = None
    message: Optional[str] = None


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return default


class AuthManager:
    def __init__(self, http: httpx.AsyncClient, session: SessionManager):
        self.http = http
        self.session = session
        self.user: Optional[UserProfile] = None
        self.auth_error: Optional[str] = None
        self.transient_error = False
        self.initialized = False
        self._logout_task: Optional[asyncio.Task] = None
        session.subscribe(self._on_session_state)

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_active and self.user is not None

    def clear_error(self) -> None:
        self.auth_error = None

    def _on_session_state(self, previous: SessionState, current: SessionState) -> None:
        if current in (SessionState.anonymous, SessionState.expired) and self.user is not None:
            logger.info("Session ended, clearing user data")
            self.user = None
            notice = self.session.consume_notice()
            if notice:
                self.auth_error = notice

    async def initialize(self) -> Optional[UserProfile]:
        """
        Resolve who is signed in when the page loads.

        A network failure or a server error is recorded as transient and
        leaves the state unknown instead of signing the user out. Only a 401
        means anonymous.
        """
        try:
            user = await self.fetch_current_user()
        except TransientAuthError as exc:
            logger.warning(f"Auth initialization deferred: {exc}")
            self.transient_error = True
            return None
        finally:
            self.initialized = True

        self.transient_error = False
        if user is not None:
            self.user = user
            self.session.mark_signed_in()
        else:
            self.user = None
            self.session.mark_signed_out(cleanup_done=False)
        return user

    async def fetch_current_user(self) -> Optional[UserProfile]:
        """
        Returns:
            The signed-in user, or None on 401

        Raises:
            NetworkError: the request never reached the server
            ServerUnavailableError: any error status other than 401
        """
        try:
            response = await self.http.get("/auth/me")
        except httpx.TransportError as exc:
            raise NetworkError(str(exc)) from exc

        if response.status_code == 401:
            return None
        if not response.is_success:
            logger.warning(f"Current user lookup failed: HTTP {response.status_code}")
            raise ServerUnavailableError(response.status_code)
        return UserProfile.from_payload(response.json()["user"])

    async def refresh_user(self) -> Optional[UserProfile]:
        if not self.session.is_active:
            return None
        user = await self.fetch_current_user()
        self.user = user
        return user

    async def signin(self, email: str, password: str) -> AuthResult:
        self.auth_error = None
        return await self._authenticate(
            "/auth/signin", {"email": email, "password": password}, "Login failed"
        )

    async def signup(self, name: str, email: str, password: str) -> AuthResult:
        self.auth_error = None
        fields = {"name": name, "email": email, "password": password}
        missing = [key for key in ("email", "password", "name") if not fields[key]]
        if missing:
            self.auth_error = f"Missing required fields: {', '.join(missing)}"
            return AuthResult(success=False, message=self.auth_error)

        return await self._authenticate("/auth/signup", fields, "Registration failed")

    async def _authenticate(self, path: str, payload: dict, default_error: str) -> AuthResult:
        try:
            response = await self.http.post(path, json=payload)
        except httpx.TransportError as exc:
            logger.error(f"{path} network error: {exc}")
            self.auth_error = NETWORK_ERROR_MESSAGE
            return AuthResult(success=False, message=NETWORK_ERROR_MESSAGE)

        if not response.is_success:
            self.auth_error = _error_message(response, default_error)
            return AuthResult(success=False, message=self.auth_error)

        self.user = UserProfile.from_payload(response.json()["user"])
        self.session.mark_signed_in()
        await self.session.check_session()
        return AuthResult(success=True, user=self.user)

    async def logout(self) -> AuthResult:
        """
        Sign out, sending a single destroy request even for overlapping calls.

        Local state is cleared whatever the server answers.
        """
        if self._logout_task is None or self._logout_task.done():
            task = asyncio.ensure_future(self._logout())
            task.add_done_callback(self._forget_logout_task)
            self._logout_task = task
        # A cancelled caller must not cancel the shared request
        return await asyncio.shield(self._logout_task)

    def _forget_logout_task(self, task: asyncio.Task) -> None:
        if self._logout_task is task:
            self._logout_task = None

    async def _logout(self) -> AuthResult:
        self.session.stop_heartbeat()

        server_ok = False
        try:
            response = await self.http.post("/auth/logout")
            server_ok = response.is_success
        except httpx.TransportError as exc:
            logger.warning(f"Server logout failed: {exc}")

        self.session.mark_signed_out()
        self.user = None
        self.auth_error = None

        if server_ok:
            return AuthResult(success=True)
        return AuthResult(success=False, message="Logout failed, but local session cleared")
