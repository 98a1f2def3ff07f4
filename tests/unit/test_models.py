"""Tests for captionreel data models and errors."""

import pytest

from captionreel.models.errors import (
    CaptionGenerationFailed,
    CaptionreelError,
    ErrorResponse,
    InvalidInput,
    InvocationError,
    MalformedUpstreamResponse,
    RenderError,
    RenderFailed,
    RenderTimedOut,
    StoreWriteFailed,
    UpstreamUnavailable,
)
from captionreel.models.render import CaptionResult, RenderJobOutcome, RenderParameters


class TestCaptionResult:
    def test_lines_skip_blanks(self):
        result = CaptionResult(text="one\n\n  two  \nthree\n")
        assert result.lines == ["one", "two", "three"]

    def test_empty_rejected(self):
        with pytest.raises(Exception):
            CaptionResult(text="")


class TestRenderParameters:
    def test_serializes_camel_case(self):
        params = RenderParameters(job_id="j1", prompt_text="hello")
        data = params.model_dump(by_alias=True)
        assert data["promptText"] == "hello"
        assert data["jobId"] == "j1"
        assert data["createdAt"].tzinfo is not None

    def test_empty_prompt_rejected(self):
        with pytest.raises(Exception):
            RenderParameters(job_id="j1", prompt_text="")


class TestRenderJobOutcome:
    def test_succeeded(self):
        assert RenderJobOutcome(exit_code=0).succeeded
        assert not RenderJobOutcome(exit_code=1).succeeded

    def test_short_stderr_unchanged(self):
        assert RenderJobOutcome(exit_code=1, stderr=" oops \n").stderr_excerpt(100) == "oops"

    def test_long_stderr_keeps_tail(self):
        outcome = RenderJobOutcome(exit_code=1, stderr="a" * 1000 + "END")
        excerpt = outcome.stderr_excerpt(10)
        assert excerpt == "…aaaaaaaEND"

    def test_zero_limit(self):
        assert RenderJobOutcome(exit_code=1, stderr="x").stderr_excerpt(0) == ""


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "cls, component, base",
        [
            (InvalidInput, "validation", CaptionreelError),
            (UpstreamUnavailable, "captions", CaptionGenerationFailed),
            (MalformedUpstreamResponse, "captions", CaptionGenerationFailed),
            (StoreWriteFailed, "persistence", CaptionreelError),
            (InvocationError, "rendering", RenderError),
            (RenderFailed, "rendering", RenderError),
            (RenderTimedOut, "rendering", RenderError),
        ],
    )
    def test_components(self, cls, component, base):
        err = cls("message")
        assert isinstance(err, base)
        assert err.component == component
        assert err.details == {}


class TestErrorResponse:
    def test_from_exception(self):
        resp = ErrorResponse.from_exception(RenderFailed("Render failed"), details="stderr tail")
        content = resp.to_content()
        assert content == {
            "error": "Render failed",
            "details": "stderr tail",
            "errorType": "RenderFailed",
            "stage": "rendering",
            "retryPossible": False,
        }

    def test_details_omitted_when_absent(self):
        content = ErrorResponse.from_exception(InvalidInput("Prompt is too long.")).to_content()
        assert "details" not in content
        assert content["error"] == "Prompt is too long."
