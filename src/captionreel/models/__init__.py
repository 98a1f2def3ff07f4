"""Data models for captionreel."""

from captionreel.models.errors import (
    ArtifactNotFound,
    CaptionGenerationFailed,
    CaptionreelError,
    ErrorResponse,
    InvalidInput,
    InvocationError,
    MalformedUpstreamResponse,
    PipelineError,
    RenderError,
    RenderFailed,
    RenderTimedOut,
    StoreWriteFailed,
    UpstreamUnavailable,
)
from captionreel.models.pipeline import PipelineStage
from captionreel.models.render import (
    CaptionResult,
    RenderConstraints,
    RenderJobOutcome,
    RenderParameters,
    RenderRequest,
    VideoArtifact,
)

__all__ = [
    "ArtifactNotFound",
    "CaptionGenerationFailed",
    "CaptionResult",
    "CaptionreelError",
    "ErrorResponse",
    "InvalidInput",
    "InvocationError",
    "MalformedUpstreamResponse",
    "PipelineError",
    "PipelineStage",
    "RenderConstraints",
    "RenderError",
    "RenderFailed",
    "RenderJobOutcome",
    "RenderParameters",
    "RenderRequest",
    "RenderTimedOut",
    "StoreWriteFailed",
    "UpstreamUnavailable",
    "VideoArtifact",
]
