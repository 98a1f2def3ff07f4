"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from captionreel import __version__
from captionreel.api.middleware import (
    captionreel_error_handler,
    request_validation_handler,
    unhandled_error_handler,
)
from captionreel.api.routes import render, videos
from captionreel.config import get_settings
from captionreel.models.errors import CaptionreelError


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title="captionreel",
        description="Prompt-to-captioned-video render service",
        version=__version__,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(CaptionreelError, captionreel_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Routes
    app.include_router(render.router)
    app.include_router(videos.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
