import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.api.error import (
    ClientError,
    client_error_handler,
    command_validation_error_handler,
    persistence_error_handler,
)
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import health, invoices

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    """Construct and configure the FastAPI application"""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from src.depends import engine, init_models

        if config.CREATE_TABLES_ON_STARTUP:
            await init_models()
            logger.info("Database tables ensured")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Invoice Ledger API",
        description="Create, edit, pay, delete and print invoices with line items.",
        version="1.0.0",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router, prefix=config.API_PREFIX)
    app.include_router(invoices.router, prefix=config.API_PREFIX)

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)
    app.add_exception_handler(ValidationError, command_validation_error_handler)

    return app
