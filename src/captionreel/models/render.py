"""Render request, parameter and result data models."""

from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RenderConstraints(BaseModel):
    """Limits applied to an incoming render request."""

    max_length: int = Field(default=500, gt=0)


class RenderRequest(BaseModel):
    """A single prompt submitted for rendering."""

    prompt_text: str
    constraints: RenderConstraints = Field(default_factory=RenderConstraints)


class CaptionResult(BaseModel):
    """Caption script produced by the text-generation service."""

    text: str = Field(..., min_length=1)

    @property
    def lines(self) -> list[str]:
        return [line.strip() for line in self.text.splitlines() if line.strip()]


class RenderParameters(BaseModel):
    """Inputs the render engine reads from the parameter side-channel."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_id: str = Field(..., min_length=1)
    prompt_text: str = Field(..., min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class RenderJobOutcome(BaseModel):
    """Exit status and captured streams of one render process."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = Field(default=0.0, ge=0)
    command: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def stderr_excerpt(self, limit: int) -> str:
        """Return at most *limit* trailing characters of stderr."""
        text = self.stderr.strip()
        if limit <= 0:
            return ""
        if len(text) <= limit:
            return text
        return "…" + text[-limit:]


class VideoArtifact(BaseModel):
    """A rendered video and its public locator."""

    job_id: str
    path: str = Field(..., description="Filesystem path of the rendered video")
    url: str = Field(..., description="Public path the video is served under")
    mime_type: str = Field(default="video/mp4")

    @property
    def output_file(self) -> Path:
        return Path(self.path)
