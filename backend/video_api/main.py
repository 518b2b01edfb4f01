"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from video_api.application.schemas import ErrorsResponse, FieldErrorSchema
from video_api.application.services import VideoService
from video_api.config import Settings, get_settings
from video_api.domain.exceptions import ValidationFailedError
from video_api.infrastructure.logging.log_config import setup_logging
from video_api.infrastructure.repositories import InMemoryVideoRepository
from video_api.presentation.api.router import build_api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, seed the demo video."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    if settings.seed_sample_video:
        service = VideoService(app.state.video_repository)
        video = await service.seed_sample_video()
        logger.info("Seeded sample video %s", video.id)

    logger.info(
        "%s %s started (env=%s, prefix=%s)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.api_prefix,
    )
    yield


async def _validation_failed_handler(
    request: Request, exc: ValidationFailedError
) -> JSONResponse:
    body = ErrorsResponse(
        errorsMessages=[
            FieldErrorSchema(message=e.message, field=e.field) for e in exc.errors
        ]
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.video_repository = InMemoryVideoRepository()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationFailedError, _validation_failed_handler)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {"message": "Video API is working!"}

    # Mount API routes
    app.include_router(build_api_router(settings))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "video_api.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.app_env == "development",
    )
