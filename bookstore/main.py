"""
Application entry point.

Creates the FastAPI application and wires together:
- AppContext (settings, database engine, password hasher, logger)
- Routers (health, books, users)
- Error handlers (centralized tagged-error-to-HTTP mapping)
- Middleware (request logging, access token)
- Logging configuration
- Lifespan (idempotent schema creation, engine disposal)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from bookstore.core.config import Settings, get_settings
from bookstore.core.context import AppContext
from bookstore.domain.errors import PersistenceError
from bookstore.infrastructure.database import build_engine, init_schema
from bookstore.infrastructure.password_hasher import BcryptPasswordHasher
from bookstore.interfaces.books.router import router as books_router
from bookstore.interfaces.health import router as health_router
from bookstore.interfaces.users.router import router as users_router
from bookstore.shared.errors.handlers import register_error_handlers
from bookstore.shared.logging import configure_logging
from bookstore.shared.request_logging import RequestLoggingMiddleware
from bookstore.shared.security.auth import AccessTokenMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create tables on startup, release the pool on shutdown."""
    context: AppContext = app.state.context
    try:
        init_schema(context.engine)
    except PersistenceError:
        context.logger.error("Error Database Init Failed")
        raise
    context.logger.info("Success Database Connection Initialized")

    yield

    context.logger.info("App is shutting down...")
    context.engine.dispose()
    context.logger.info("Server is fully shutdown")


def build_context(settings: Settings) -> AppContext:
    """Build the per-process collaborators from settings."""
    return AppContext(
        settings=settings,
        engine=build_engine(settings),
        hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        logger=logging.getLogger("bookstore"),
    )


def create_app(
    settings: Optional[Settings] = None, context: Optional[AppContext] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use; read from the environment when omitted.
        context: Prebuilt collaborators; built from ``settings`` when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    if context is None:
        settings = settings or get_settings()
        context = build_context(settings)
    settings = context.settings

    configure_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        request_log_file=settings.request_log_file,
    )
    context.logger.info("Success Config Loaded")

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.context = context

    # --- Middleware (last added runs first) ---
    app.add_middleware(AccessTokenMiddleware, access_token=settings.access_token)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(books_router)
    app.include_router(users_router)

    return app
