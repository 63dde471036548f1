"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from jobspark.api import api_router
from jobspark.config import Settings, settings as default_settings
from jobspark.core.exceptions import JobSparkError
from jobspark.core.logging import setup_logging
from jobspark.db.mongodb import MongoDB
from jobspark.repositories import UserRepository, create_user_repository

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> None:
    # Only if DSN is properly configured
    if not (settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://")):
        logger.info("Sentry DSN not configured - error tracking disabled")
        return
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(level=None, event_level="ERROR"),
        ],
        release=settings.APP_VERSION,
        send_default_pii=False,
    )


async def jobspark_error_handler(request: Request, exc: JobSparkError):
    body = {"success": False, "message": exc.message}
    if exc.detail:
        body["error"] = exc.detail
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.detail})")
    return JSONResponse(status_code=exc.status_code, content=body)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request body", "error": str(exc.errors())},
    )


def create_app(
    settings: Optional[Settings] = None,
    user_repository: Optional[UserRepository] = None,
) -> FastAPI:
    """
    Build the application.

    Passing `user_repository` skips the MongoDB connection entirely, which
    is how tests run the app against the in-memory store.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        mongodb = None
        repository = user_repository
        if repository is None:
            database = None
            if settings.STORAGE_TYPE.lower() == "mongodb":
                mongodb = MongoDB(settings)
                database = await mongodb.connect()
            repository = create_user_repository(settings, database)
            await repository.ensure_indexes()
        app.state.mongodb = mongodb
        app.state.user_repository = repository
        if settings.is_production and settings.SECRET_KEY == Settings.model_fields["SECRET_KEY"].default:
            logger.warning("SECRET_KEY is the development default in production")
        yield
        if mongodb is not None:
            await mongodb.close()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Job tracking backend: sessions, user profiles and profile progress",
        lifespan=lifespan,
    )
    if user_repository is not None:
        # Usable without running the lifespan (e.g. under ASGITransport)
        app.state.mongodb = None
        app.state.user_repository = user_repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(JobSparkError, jobspark_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        content = {"success": False, "message": "Internal server error"}
        if settings.DEBUG:
            content["error"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    app.include_router(api_router)

    @app.get("/", tags=["Health"], response_class=PlainTextResponse)
    async def root():
        """Liveness check."""
        return "JobSpark server is running"

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        mongodb = getattr(request.app.state, "mongodb", None)
        if mongodb is None:
            database = "not configured"
        else:
            database = "connected" if await mongodb.ping() else "unreachable"
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "database": database,
        }

    return app


def run() -> None:
    import uvicorn

    uvicorn.run(
        "jobspark.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
    )


setup_logging()
init_sentry(default_settings)

app = create_app()


if __name__ == "__main__":
    run()
