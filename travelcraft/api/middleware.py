"""
HTTP middleware: session resolution and request logging.
"""

import logging
import time

from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from travelcraft.libs.result import Error

from travelcraft.api.error import server_error_response
from travelcraft.app.services.session_context import SessionContext

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Resolves the session cookie into a ``SessionContext`` for every request.

    The store is read from ``app.state.session_store`` at dispatch time. The
    record is touched before the handler runs; after it returns the cookie
    is refreshed, or cleared when the handler destroyed the session.
    """

    def __init__(self, app, cookie_name: str, max_age: int, secure: bool = False):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.secure = secure

    async def dispatch(self, request: Request, call_next):
        store = request.app.state.session_store
        session_id = request.cookies.get(self.cookie_name)

        try:
            record = await store.resolve(session_id)
        except SQLAlchemyError as exc:
            logger.error(f"Session store unavailable: {exc}")
            return server_error_response(
                Error("STORE_UNAVAILABLE", "Session store unavailable")
            )

        context = SessionContext(record)
        request.state.session_context = context

        response: Response = await call_next(request)

        if context.destroyed:
            response.delete_cookie(
                self.cookie_name, path="/", httponly=True, samesite="lax", secure=self.secure
            )
        else:
            response.set_cookie(
                key=self.cookie_name,
                value=context.session_id,
                max_age=self.max_age,
                path="/",
                httponly=True,
                samesite="lax",
                secure=self.secure,
            )
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = int((time.perf_counter() - start) * 1000)
            status_code = response.status_code if response else 500
            logger.info(
                f"{request.method} {request.url.path} -> {status_code} ({duration_ms} ms)"
            )
