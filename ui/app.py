"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import BatchLimitError
from internal.health import (
    HealthChecker,
    check_codec,
    check_event_loop,
    create_generator_check,
    create_logger_check,
)
from internal.logging import get_logger, parse_level, StructuredLogger, AsyncFileLogger
from ksuid import KSUIDError
from service.generator import KSUIDGenerator
from ui import auth
from ui.routes import api, health, identifiers
from utils.crash import create_async_handler

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()

    # Create core components
    audit = AsyncFileLogger(file_path=config.logging.file)
    generator = KSUIDGenerator(config=config.generator, audit=audit)
    health_checker = HealthChecker()

    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("codec", check_codec, critical=True)
    health_checker.register("generator", create_generator_check(generator), critical=True)
    health_checker.register("audit_logger", create_logger_check(audit), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger_instance.info("Application starting", version=VERSION)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        await audit.start()
        logger_instance.info("Application started successfully")

        yield

        # Shutdown
        logger_instance.info("Application shutting down")
        await audit.stop()
        logger_instance.info("Application shutdown complete", **generator.get_stats())

    app = FastAPI(
        title="KSUID Service",
        version=VERSION,
        description="K-sortable unique identifier issuance and inspection",
        lifespan=lifespan,
    )

    @app.exception_handler(KSUIDError)
    async def ksuid_error(request: Request, exc: KSUIDError):
        return JSONResponse(status_code=400, content={"error": exc.kind, "msg": str(exc)})

    @app.exception_handler(BatchLimitError)
    async def batch_limit_error(request: Request, exc: BatchLimitError):
        logger_instance.warn("Batch rejected", error=exc, error_id=exc.error_id)
        return JSONResponse(status_code=400, content={"error": "batch-limit", **exc.to_dict()})

    # Initialize route modules with dependencies
    auth.init(config.auth)
    identifiers.init(generator)
    api.init(generator, audit)
    health.init(generator, health_checker)

    # Include routers
    app.include_router(identifiers.router)
    app.include_router(api.router)
    app.include_router(health.router)

    app.state.generator = generator
    app.state.audit = audit
    app.state.health_checker = health_checker
    return app
