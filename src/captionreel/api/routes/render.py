"""Render endpoint."""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from captionreel.api.dependencies import get_app_settings, get_pipeline_manager
from captionreel.config import Settings
from captionreel.models.render import RenderConstraints, RenderRequest
from captionreel.pipeline.manager import PipelineManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["render"])


class RenderVideoBody(BaseModel):
    user_prompt: str | None = Field(default=None, alias="userPrompt")


class RenderVideoResponse(BaseModel):
    message: str
    output_path: str = Field(..., serialization_alias="outputPath")
    job_id: str = Field(..., serialization_alias="jobId")


@router.post("/render-video")
async def render_video(
    body: RenderVideoBody,
    manager: PipelineManager = Depends(get_pipeline_manager),
    settings: Settings = Depends(get_app_settings),
):
    """Generate captions for a prompt and render them into a video."""
    logger.info("Received render request")
    request = RenderRequest(
        prompt_text=body.user_prompt or "",
        constraints=RenderConstraints(max_length=settings.max_prompt_length),
    )
    artifact = await manager.render_video(request)

    response = RenderVideoResponse(
        message="Video rendered successfully!",
        output_path=artifact.url,
        job_id=artifact.job_id,
    )
    return response.model_dump(by_alias=True)
