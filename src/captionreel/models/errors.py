"""Error hierarchy and error response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CaptionreelError(Exception):
    """Base error for all captionreel errors."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class InvalidInput(CaptionreelError):
    """The render request failed validation."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="validation", details=details)


class CaptionGenerationFailed(CaptionreelError):
    """The caption stage could not produce text."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="captions", details=details)


class UpstreamUnavailable(CaptionGenerationFailed):
    """Network, auth or API failure talking to the text-generation service."""


class MalformedUpstreamResponse(CaptionGenerationFailed):
    """The upstream response did not have the expected shape."""


class StoreWriteFailed(CaptionreelError):
    """Render parameters could not be persisted."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="persistence", details=details)


class RenderError(CaptionreelError):
    """Errors during video rendering."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="rendering", details=details)


class InvocationError(RenderError):
    """The render engine process could not be launched."""


class RenderFailed(RenderError):
    """The render engine ran but did not produce a video."""


class RenderTimedOut(RenderError):
    """The render engine exceeded its wall-clock bound and was terminated."""


class PipelineError(CaptionreelError):
    """Unexpected failure inside a pipeline stage."""

    def __init__(self, message: str, component: str = "pipeline", details: dict | None = None):
        super().__init__(message, component=component, details=details)


class ArtifactNotFound(CaptionreelError):
    """A requested video artifact does not exist."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="artifacts", details=details)


class ErrorResponse(BaseModel):
    """Standardized error response for API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error: str = Field(..., description="Human-readable error message")
    details: str | None = Field(default=None, description="Bounded diagnostic excerpt")
    error_type: str = Field(..., description="Error category")
    stage: str = Field(default="", description="Pipeline stage that raised the error")
    retry_possible: bool = Field(default=False)

    @classmethod
    def from_exception(
        cls, exc: CaptionreelError, details: str | None = None, retry: bool = False
    ) -> "ErrorResponse":
        return cls(
            error=exc.message,
            details=details,
            error_type=type(exc).__name__,
            stage=exc.component,
            retry_possible=retry,
        )

    def to_content(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
