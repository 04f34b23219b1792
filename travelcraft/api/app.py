from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
from .middleware import RequestLoggingMiddleware, SessionMiddleware
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig, session_store=None) -> FastAPI:
    from travelcraft.app.services.session_store import SessionStore
    from travelcraft.depends import unit_of_work_scope

    window = timedelta(minutes=ApplicationConfig.SESSION_WINDOW_MINUTES)
    if session_store is None:
        session_store = SessionStore(unit_of_work_scope, window=window)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = app.state.session_store
        store.start_sweep(ApplicationConfig.SESSION_SWEEP_INTERVAL_SECONDS)
        try:
            yield
        finally:
            await store.stop_sweep()

    app = FastAPI(title="Travel Craft API", version="0.1.0", lifespan=lifespan)
    app.state.session_store = session_store

    # Added innermost first: sessions, then logging, CORS outermost
    app.add_middleware(
        SessionMiddleware,
        cookie_name=ApplicationConfig.SESSION_COOKIE_NAME,
        max_age=int(window.total_seconds()),
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from travelcraft.api.routes import auth, chat, contact, health_check, posts

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(posts.router, prefix=prefix, tags=["Posts"])
    app.include_router(contact.router, prefix=prefix, tags=["Contact"])
    app.include_router(chat.router, prefix=prefix, tags=["Chat"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
