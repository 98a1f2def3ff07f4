"""Dependency injection providers for FastAPI."""

from functools import lru_cache

from google import genai

from captionreel.captions.generator import CaptionGenerator
from captionreel.config import Settings, get_settings
from captionreel.pipeline.manager import PipelineManager
from captionreel.rendering.engine import RenderingEngine
from captionreel.storage.params_store import RenderParameterStore


@lru_cache
def get_genai_client() -> genai.Client:
    settings = get_settings()
    if not settings.gemini_api_key:
        raise RuntimeError("GEMINI_API_KEY is not set")
    return genai.Client(api_key=settings.gemini_api_key)


@lru_cache
def get_rendering_engine() -> RenderingEngine:
    return RenderingEngine()


@lru_cache
def get_pipeline_manager() -> PipelineManager:
    settings = get_settings()
    return PipelineManager(
        caption_generator=CaptionGenerator(get_genai_client()),
        param_store=RenderParameterStore(settings.params_dir),
        renderer=get_rendering_engine(),
        settings=settings,
    )


def get_app_settings() -> Settings:
    return get_settings()
