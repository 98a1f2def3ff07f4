"""Shared test fixtures and stub collaborators."""

from pathlib import Path
from types import SimpleNamespace

import pytest

import captionreel.api.dependencies as deps
from captionreel.captions.generator import CaptionGenerator
from captionreel.config import get_settings
from captionreel.models.errors import StoreWriteFailed
from captionreel.models.render import RenderJobOutcome
from captionreel.pipeline.manager import PipelineManager
from captionreel.storage.params_store import RenderParameterStore

SAMPLE_CAPTIONS = "\n".join(
    [
        "Whiskers crouches on the fence",
        "The crowd holds its breath",
        "One leap into the sky",
        "A full rotation, tail like a rudder",
        "Four paws land without a sound",
        "Nailed it. Obviously.",
    ]
)


def gemini_response(text):
    """Plain-dict form of a Gemini generateContent response."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeModels:
    """Stands in for ``genai.Client().aio.models``."""

    def __init__(self, response=None, error=None, echo=False):
        self.response = response
        self.error = error
        self.echo = echo
        self.calls = []

    async def generate_content(self, *, model, contents):
        self.calls.append({"model": model, "contents": contents})
        if self.error is not None:
            raise self.error
        if self.echo:
            return gemini_response(contents.rsplit("Prompt: ", 1)[-1])
        return self.response


def make_genai_client(models):
    return SimpleNamespace(aio=SimpleNamespace(models=models))


class StubRenderer:
    """Render invoker double that records calls and fakes the output file."""

    def __init__(self, exit_code=0, stderr="", produce_output=True, error=None):
        self.exit_code = exit_code
        self.stderr = stderr
        self.produce_output = produce_output
        self.error = error
        self.calls = []

    async def invoke(self, params_path, output_path):
        self.calls.append((Path(params_path), Path(output_path)))
        if self.error is not None:
            raise self.error
        if self.exit_code == 0 and self.produce_output:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(Path(params_path).read_bytes())
        return RenderJobOutcome(exit_code=self.exit_code, stdout="", stderr=self.stderr)


class FailingStore(RenderParameterStore):
    """Parameter store whose writes always fail."""

    async def persist(self, parameters):
        raise StoreWriteFailed("Failed to persist render parameters")


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Point every setting at a per-test directory and reset cached singletons."""
    monkeypatch.chdir(tmp_path)
    for name in ("GEMINI_API_KEY", "CAPTIONREEL_GEMINI_API_KEY", "PORT", "CAPTIONREEL_PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("CAPTIONREEL_ARTIFACTS_DIR", str(tmp_path / "artifacts"))
    monkeypatch.setenv("CAPTIONREEL_RENDER_PROJECT_DIR", str(tmp_path / "project"))
    monkeypatch.setenv("CAPTIONREEL_RENDER_TIMEOUT_SECONDS", "10")
    monkeypatch.setenv("CAPTIONREEL_RENDER_KILL_GRACE_SECONDS", "1")
    (tmp_path / "project").mkdir()

    get_settings.cache_clear()
    deps.get_genai_client.cache_clear()
    deps.get_rendering_engine.cache_clear()
    deps.get_pipeline_manager.cache_clear()
    yield
    get_settings.cache_clear()
    deps.get_genai_client.cache_clear()
    deps.get_rendering_engine.cache_clear()
    deps.get_pipeline_manager.cache_clear()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def fake_models():
    return FakeModels(response=gemini_response(SAMPLE_CAPTIONS))


@pytest.fixture
def caption_generator(fake_models):
    return CaptionGenerator(make_genai_client(fake_models))


@pytest.fixture
def stub_renderer():
    return StubRenderer()


@pytest.fixture
def manager(caption_generator, stub_renderer, settings):
    return PipelineManager(
        caption_generator=caption_generator,
        param_store=RenderParameterStore(settings.params_dir),
        renderer=stub_renderer,
        settings=settings,
    )
