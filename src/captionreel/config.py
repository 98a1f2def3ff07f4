"""Application configuration using Pydantic BaseSettings."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """captionreel configuration loaded from environment variables."""

    model_config = {
        "env_prefix": "CAPTIONREEL_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    # LLM
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("CAPTIONREEL_GEMINI_API_KEY", "GEMINI_API_KEY"),
    )
    gemini_model: str = "gemini-1.5-flash"
    caption_min_lines: int = 6

    # Request constraints
    max_prompt_length: int = 500

    # Directories
    artifacts_dir: Path = Path("artifacts")
    render_project_dir: Path = Path("TIKTOK")

    # Rendering
    render_command: list[str] = ["npx", "remotion", "render"]
    render_entry_point: str = "src/index.ts"
    composition_id: str = "CaptionedVideo"
    render_timeout_seconds: float = 600.0
    render_kill_grace_seconds: float = 5.0
    max_concurrent_renders: int = 4
    stderr_excerpt_chars: int = 500

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=5000, validation_alias=AliasChoices("CAPTIONREEL_PORT", "PORT"))
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    @property
    def videos_dir(self) -> Path:
        return self.artifacts_dir / "videos"

    @property
    def params_dir(self) -> Path:
        return self.artifacts_dir / "params"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
