"""Pipeline manager — sequences caption generation, persistence and rendering."""

import logging
import uuid
from pathlib import Path

from captionreel.captions.generator import CaptionGenerator
from captionreel.config import Settings, get_settings
from captionreel.models.errors import (
    CaptionreelError,
    InvalidInput,
    PipelineError,
    RenderFailed,
)
from captionreel.models.pipeline import PipelineStage
from captionreel.models.render import RenderParameters, RenderRequest, VideoArtifact
from captionreel.rendering.engine import RenderingEngine
from captionreel.storage.params_store import RenderParameterStore

logger = logging.getLogger(__name__)

VIDEOS_URL_PREFIX = "/videos"


class PipelineManager:
    """Runs one render per request: captions → parameters → render → artifact."""

    def __init__(
        self,
        caption_generator: CaptionGenerator,
        param_store: RenderParameterStore | None = None,
        renderer: RenderingEngine | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.caption_generator = caption_generator
        self.param_store = param_store or RenderParameterStore(self.settings.params_dir)
        self.renderer = renderer or RenderingEngine()

    def validate_request(self, request: RenderRequest) -> None:
        """Reject empty or oversized prompts."""
        if not request.prompt_text:
            raise InvalidInput("No userPrompt provided.")
        max_length = request.constraints.max_length
        if len(request.prompt_text) > max_length:
            raise InvalidInput(
                "Prompt is too long.",
                details={"length": len(request.prompt_text), "max_length": max_length},
            )

    def output_path_for(self, job_id: str) -> Path:
        return Path(self.settings.videos_dir) / f"{job_id}.mp4"

    async def render_video(self, request: RenderRequest) -> VideoArtifact:
        """Run the full render pipeline for one prompt.

        Strict ordering: validate → captions → persist → render. Every run gets
        its own job id, and all of its files are named after it.
        """
        try:
            self.validate_request(request)
        except InvalidInput as e:
            logger.info(
                "Stage %s rejected request: %s", PipelineStage.VALIDATION.value, e.message
            )
            raise

        job_id = uuid.uuid4().hex
        logger.info("[%s] Render run started (%d chars)", job_id, len(request.prompt_text))

        stage = PipelineStage.CAPTIONS
        output_path = self.output_path_for(job_id)
        params_written = False
        succeeded = False
        try:
            # Stage 1: Captions
            captions = await self.caption_generator.generate_captions(request.prompt_text)
            logger.info("[%s] Generated %d caption lines", job_id, len(captions.lines))

            # Stage 2: Parameters
            stage = PipelineStage.PERSISTENCE
            parameters = RenderParameters(job_id=job_id, prompt_text=captions.text)
            params_path = await self.param_store.persist(parameters)
            params_written = True

            # Stage 3: Rendering
            stage = PipelineStage.RENDERING
            outcome = await self.renderer.invoke(params_path, output_path)
            if not outcome.succeeded:
                raise RenderFailed(
                    "Render failed",
                    details={
                        "exit_code": outcome.exit_code,
                        "excerpt": outcome.stderr_excerpt(self.settings.stderr_excerpt_chars),
                    },
                )
            if not output_path.is_file():
                raise RenderFailed(
                    "Render engine exited cleanly but produced no video",
                    details={"output": str(output_path)},
                )

            succeeded = True
        except CaptionreelError as e:
            logger.error("[%s] Stage %s failed: %s", job_id, stage.value, e.message)
            raise
        except Exception as e:
            logger.exception("[%s] Unexpected error in stage %s", job_id, stage.value)
            raise PipelineError(
                f"Pipeline failed during {stage.value}", component=stage.value
            ) from e
        finally:
            if not succeeded:
                self._discard_run(job_id, output_path, params_written)

        logger.info("[%s] Render run complete: %s", job_id, output_path)
        return VideoArtifact(
            job_id=job_id,
            path=str(output_path),
            url=f"{VIDEOS_URL_PREFIX}/{output_path.name}",
        )

    def _discard_run(self, job_id: str, output_path: Path, params_written: bool) -> None:
        """Remove whatever a failed or cancelled run left on disk."""
        try:
            if params_written:
                self.param_store.discard(job_id)
            output_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("[%s] Cleanup after failed run incomplete: %s", job_id, e)
