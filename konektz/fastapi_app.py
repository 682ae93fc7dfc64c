"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- health, auth (register/login), conversations (+ messages)
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from konektz.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from konektz.config.settings import Config, get_config
from konektz.infrastructure.persistence import Database
from konektz.infrastructure.security import JwtCredentialVerifier
from konektz.presentation.api import auth_router, conversations_router, health_router
from konektz.presentation.errors import (
    internal_error_response,
    register_exception_handlers,
)
from konektz.setup.ioc import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        except Exception as exc:
            # ServerErrorMiddleware would answer after the reset below
            response = internal_error_response(request, exc, request.app.state.config)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: resolve the Database so the schema exists before the first request
    - Shutdown: close DI container (disposes the engine)
    """
    container = app.state.dishka_container
    await container.get(Database)
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(config: Optional[type[Config]] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Raises:
        ConfigurationError: if JWT_SECRET or DATABASE_URL is missing
    """
    config = config or get_config()
    config.validate()

    setup_logging(config.LOG_LEVEL, config.LOG_PATH, config.LOG_FORMAT)

    app = FastAPI(
        title="Konektz API",
        description="User accounts and two-party direct messaging",
        version="1.0.0",
        lifespan=lifespan,
    )

    credential_verifier = JwtCredentialVerifier(
        config.JWT_SECRET,
        ttl=timedelta(days=config.JWT_EXPIRES_DAYS),
        algorithm=config.JWT_ALGORITHM,
    )
    app.state.config = config
    app.state.credential_verifier = credential_verifier

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    container = create_container(config, credential_verifier)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, config)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(conversations_router)

    logger.info(f"Application created ({config.APP_ENV})")
    return app
