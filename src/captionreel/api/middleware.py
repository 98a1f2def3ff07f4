"""Error handlers mapping pipeline failures onto the API error envelope."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from captionreel.models.errors import (
    ArtifactNotFound,
    CaptionreelError,
    ErrorResponse,
    InvalidInput,
    UpstreamUnavailable,
)

logger = logging.getLogger(__name__)


async def captionreel_error_handler(request: Request, exc: CaptionreelError) -> JSONResponse:
    """Handle CaptionreelError exceptions."""
    status_code = _get_status_code(exc)
    if status_code >= 500:
        logger.error(
            "%s %s failed in %s: %s (%s)",
            request.method,
            request.url.path,
            exc.component or "pipeline",
            exc.message,
            type(exc).__name__,
        )
    response = ErrorResponse.from_exception(
        exc,
        details=_get_public_details(exc),
        retry=_is_retryable(exc),
    )
    return JSONResponse(status_code=status_code, content=response.to_content())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as invalid input."""
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return await captionreel_error_handler(request, InvalidInput("Invalid request body."))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; never leaks exception text to the caller."""
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
    response = ErrorResponse(error="Internal server error", error_type="InternalError")
    return JSONResponse(status_code=500, content=response.to_content())


def _get_status_code(exc: CaptionreelError) -> int:
    """Map error type to HTTP status code."""
    if isinstance(exc, InvalidInput):
        return 400
    elif isinstance(exc, ArtifactNotFound):
        return 404
    return 500


def _get_public_details(exc: CaptionreelError) -> str | None:
    """Only the bounded stderr excerpt of a failed render is shown to callers."""
    excerpt = exc.details.get("excerpt")
    return excerpt or None


def _is_retryable(exc: CaptionreelError) -> bool:
    """Determine if the error is retryable."""
    return isinstance(exc, UpstreamUnavailable)
