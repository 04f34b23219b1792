"""
Client Session Manager

Keeps a client's view of its server session alive and honest:

- polls ``/auth/heartbeat`` on a fixed period while signed in
- tracks user activity and destroys the session once the user has been idle
  longer than the idle ceiling, ahead of the server's own rolling expiry
- pauses polling while the page is hidden and re-checks when it is shown
- sends a best-effort destroy on unload

The host (a UI shell, a CLI or a test) forwards its events to
``record_activity``, ``on_visibility_change`` and ``on_unload``. Everything runs
on one asyncio event loop.
"""

import asyncio
import logging
import time
from enum import Enum
from typing import Callable, List, Optional

import httpx

logger = logging.getLogger(__name__)

HEARTBEAT_INTERVAL_SECONDS = 2 * 60
IDLE_CEILING_SECONDS = 25 * 60

ACTIVITY_EVENTS = frozenset(
    {"pointerdown", "pointermove", "keypress", "scroll", "touchstart", "click"}
)

EXPIRED_NOTICE = "Your session has expired. Please sign in again."


class SessionState(str, Enum):
    """Authoritative client-side session state"""

    unknown = "unknown"
    anonymous = "anonymous"
    authenticated = "authenticated"
    expired = "expired"


StateListener = Callable[[SessionState, SessionState], None]


class HeartbeatTicket:
    """
    Handle for one running heartbeat loop.

    Returned by ``SessionManager.start_heartbeat``; cancelling it is the only
    way to stop the loop. Cancelling twice is harmless.
    """

    def __init__(self, task_factory: Callable[["HeartbeatTicket"], "asyncio.Task"]):
        self.cancelled = False
        self.task = task_factory(self)

    @property
    def active(self) -> bool:
        return not self.cancelled and not self.task.done()

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        # A tick may stop its own loop; the loop sees the flag and exits.
        if self.task is not asyncio.current_task():
            self.task.cancel()


class SessionManager:
    def __init__(
        self,
        http: httpx.AsyncClient,
        heartbeat_interval: float = HEARTBEAT_INTERVAL_SECONDS,
        idle_ceiling: float = IDLE_CEILING_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.http = http
        self.heartbeat_interval = heartbeat_interval
        self.idle_ceiling = idle_ceiling
        self.clock = clock

        self.last_activity_time = clock()
        self._state = SessionState.unknown
        self._ticket: Optional[HeartbeatTicket] = None
        self._cleanup_sent = False
        self._generation = 0
        self._mounted = False
        self._hidden = False
        self._notice: Optional[str] = None
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == SessionState.authenticated

    @property
    def heartbeat_running(self) -> bool:
        return self._ticket is not None and self._ticket.active

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def consume_notice(self) -> Optional[str]:
        """Return the pending expiry notice once, then forget it."""
        notice, self._notice = self._notice, None
        return notice

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def mount(self) -> SessionState:
        """Start observing activity and perform the first heartbeat check."""
        self._mounted = True
        self.mark_activity()
        await self.check_session()
        return self._state

    async def unmount(self) -> None:
        self._mounted = False
        self.stop_heartbeat()

    async def __aenter__(self):
        await self.mount()
        return self

    async def __aexit__(self, *args):
        await self.unmount()

    # ------------------------------------------------------------------
    # Activity and page events
    # ------------------------------------------------------------------

    def mark_activity(self) -> None:
        self.last_activity_time = self.clock()

    def record_activity(self, event_type: str) -> None:
        """Forwarded interaction event; ignored when unmounted or not an activity event."""
        if self._mounted and event_type in ACTIVITY_EVENTS:
            self.mark_activity()

    async def on_visibility_change(self, hidden: bool) -> None:
        self._hidden = hidden
        if hidden:
            self.stop_heartbeat()
            return

        self.mark_activity()
        if await self.check_session():
            self._ensure_heartbeat()

    async def on_unload(self) -> None:
        """Best-effort destroy on window close. Server-side expiry is the backstop."""
        self.stop_heartbeat()
        await self.cleanup_session()

    # ------------------------------------------------------------------
    # Heartbeat
    # ------------------------------------------------------------------

    def start_heartbeat(self) -> HeartbeatTicket:
        """Start the recurring liveness check, cancelling any previous one first."""
        self.stop_heartbeat()
        self._ticket = HeartbeatTicket(
            lambda ticket: asyncio.create_task(self._heartbeat_loop(ticket))
        )
        logger.debug("Heartbeat started")
        return self._ticket

    def stop_heartbeat(self) -> None:
        ticket, self._ticket = self._ticket, None
        if ticket is not None:
            ticket.cancel()
            logger.debug("Heartbeat stopped")
        # In-flight checks started before this point are now stale
        self._generation += 1

    async def _heartbeat_loop(self, ticket: HeartbeatTicket) -> None:
        while not ticket.cancelled:
            await asyncio.sleep(self.heartbeat_interval)
            if ticket.cancelled:
                break
            await self.tick()

    async def tick(self) -> bool:
        """
        One liveness check.

        Destroys the session when the user has been idle past the ceiling,
        otherwise re-confirms with the server. Returns whether the session is
        still active.
        """
        idle = self.clock() - self.last_activity_time
        if idle > self.idle_ceiling:
            logger.warning(f"User inactive for {int(idle)}s, cleaning up session")
            await self.cleanup_session(expired=True)
            return False
        return await self.check_session()

    def _ensure_heartbeat(self) -> None:
        if self.is_active and self._mounted and not self._hidden and not self.heartbeat_running:
            self.start_heartbeat()

    # ------------------------------------------------------------------
    # Server calls
    # ------------------------------------------------------------------

    async def check_session(self) -> bool:
        """
        Ask the server whether the session is authenticated.

        401 and any other non-2xx answer count as inactive, as do a
        transport failure and a 2xx body that is not JSON. A response that
        arrives after a local decision (sign-in, sign-out, stop) is dropped.
        """
        generation = self._generation
        authenticated = False
        try:
            response = await self.http.get("/auth/heartbeat")
            if response.status_code == 401:
                authenticated = False
            elif response.is_success:
                body = response.json()
                authenticated = isinstance(body, dict) and body.get("authenticated") is True
            else:
                logger.error(f"Session check failed: HTTP {response.status_code}")
        except httpx.TransportError as exc:
            logger.error(f"Session check failed (network error): {exc}")
        except ValueError as exc:
            # e.g. a captive portal answering 200 with HTML
            logger.error(f"Session check failed (unreadable body): {exc}")

        if generation != self._generation:
            logger.debug("Dropping stale heartbeat response")
            return self.is_active

        if authenticated:
            self._set_state(SessionState.authenticated)
        elif self._state != SessionState.expired:
            self._set_state(SessionState.anonymous)
        return authenticated

    async def cleanup_session(self, expired: bool = False) -> None:
        """
        Destroy the server session at most once per signed-in period.

        Failures are logged and ignored.
        """
        if self._cleanup_sent:
            return
        self._cleanup_sent = True
        self._generation += 1

        try:
            await self.http.post("/auth/cleanup-session")
            logger.info("Session cleaned up")
        except httpx.TransportError as exc:
            logger.error(f"Session cleanup failed: {exc}")

        self._set_state(SessionState.expired if expired else SessionState.anonymous)

    # ------------------------------------------------------------------
    # Hooks for the auth manager
    # ------------------------------------------------------------------

    def mark_signed_in(self) -> None:
        """A fresh server session is signed in: reset guards and start polling."""
        self._generation += 1
        self._cleanup_sent = False
        self._notice = None
        self.mark_activity()
        self._set_state(SessionState.authenticated)

    def mark_signed_out(self, cleanup_done: bool = True) -> None:
        """Stop polling before clearing state so no late tick can revive it."""
        self.stop_heartbeat()
        if cleanup_done:
            self._cleanup_sent = True
        self._set_state(SessionState.anonymous)

    def _set_state(self, state: SessionState) -> None:
        previous = self._state
        self._state = state

        if state == SessionState.authenticated:
            self._ensure_heartbeat()
        else:
            self.stop_heartbeat()

        if state == previous:
            return

        logger.info(f"Session state {previous.value} -> {state.value}")
        if state == SessionState.expired:
            self._notice = EXPIRED_NOTICE
        for listener in list(self._listeners):
            listener(previous, state)
