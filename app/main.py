from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi import _rate_limit_exceeded_handler
# Configuration
from app.core.config import FeedbackSettings
from app.core.logging_config import setup_logging
# Rate Limiter
from app.core.route_limiters import limiter
# Routers
from app.routes.health import router as health_router
from app.routes.feedback import router as feedback_router
# CORS Middleware
from app.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
# Database
from app.database import create_db_engine, create_session_factory, create_tables
# Feedback pipeline
from app.core.ai_client_manager import FeedbackClients
from app.services.feedback import (
    AttemptLogger,
    ConnectivityMonitor,
    DirectLLMClient,
    FeedbackOrchestrator,
    RemoteFeedbackClient,
)
# Error Handling
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from starlette.status import HTTP_422_UNPROCESSABLE_ENTITY
from sqlalchemy.exc import SQLAlchemyError

from app.errors.handlers import http_exception_handler, generic_exception_handler, database_error_handler


def build_orchestrator(settings: FeedbackSettings, clients: FeedbackClients, attempt_logger: AttemptLogger) -> FeedbackOrchestrator:
    """Wire the pipeline sources from settings and already-built clients."""
    remote_client = RemoteFeedbackClient(
        client=clients.backend,
        function_name=settings.function_name,
        api_key=settings.backend_key,
        timeout=settings.remote_timeout,
        max_retries=settings.remote_max_retries,
        retry_delay=settings.remote_retry_delay,
    )
    direct_client = DirectLLMClient(client=clients.llm, model=settings.direct_llm_model)
    connectivity = ConnectivityMonitor(
        offline_mode=settings.offline_mode,
        probe_url=settings.connectivity_probe_url,
        client=clients.backend,
    )
    return FeedbackOrchestrator(
        remote_client=remote_client,
        direct_client=direct_client,
        attempt_logger=attempt_logger,
        connectivity=connectivity,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    settings: FeedbackSettings = app.state.settings
    # Startup
    try:
        engine = create_db_engine(settings.database_url)
        create_tables(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        clients = FeedbackClients.from_settings(settings)
        app.state.feedback_clients = clients
        app.state.feedback_orchestrator = build_orchestrator(
            settings, clients, AttemptLogger(app.state.session_factory)
        )
        logger.info("Application startup completed successfully")
    except Exception as e:
        logger.error(f"Error during application startup: {e}")
        raise

    yield

    # Shutdown
    await app.state.feedback_clients.aclose()
    app.state.engine.dispose()
    logger.info("Application shutdown")


def create_app(settings: Optional[FeedbackSettings] = None) -> FastAPI:
    settings = settings or FeedbackSettings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Framework Feedback API",
        description="AI feedback for STAR, CAR, PARADE and CIRCLE interview answers",
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    add_cors_middleware(app, settings.cors_origins)

    # Centralized error handlers
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # Add rate limiter to the app
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.include_router(health_router)
    app.include_router(feedback_router)
    return app


app = create_app()
