"""Gemini-backed caption script generation."""

import asyncio
import logging

import httpx
from google import genai
from google.genai import errors as genai_errors

from captionreel.captions.parser import extract_caption_text
from captionreel.captions.prompts import build_caption_prompt
from captionreel.config import get_settings
from captionreel.models.errors import MalformedUpstreamResponse, UpstreamUnavailable
from captionreel.models.render import CaptionResult

logger = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (genai_errors.APIError, httpx.HTTPError, OSError, asyncio.TimeoutError)


class CaptionGenerator:
    """Turns a user prompt into caption text with a single Gemini request."""

    def __init__(
        self,
        client: genai.Client,
        model: str | None = None,
        min_lines: int | None = None,
    ):
        settings = get_settings()
        self.client = client
        self.model = model or settings.gemini_model
        self.min_lines = min_lines or settings.caption_min_lines

    async def generate_captions(self, prompt_text: str) -> CaptionResult:
        """Ask Gemini for a caption script and unwrap the text.

        Raises:
            UpstreamUnavailable: transport, auth or API failure.
            MalformedUpstreamResponse: the response lacks
                ``candidates[0].content.parts[0].text``.
        """
        contents = build_caption_prompt(prompt_text, self.min_lines)

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=contents,
            )
        except _TRANSPORT_ERRORS as e:
            logger.error("Gemini request failed (%s): %s", type(e).__name__, e)
            raise UpstreamUnavailable(
                "Text-generation service is unavailable",
                details={"error": str(e), "model": self.model},
            ) from e

        logger.debug("Gemini raw response: %r", response)

        extraction = extract_caption_text(response)
        if not extraction.ok:
            logger.error("Unexpected Gemini response shape: %s", extraction.reason)
            raise MalformedUpstreamResponse(
                "Invalid response format from text-generation service",
                details={"reason": extraction.reason, "model": self.model},
            )

        result = CaptionResult(text=extraction.text)
        if len(result.lines) < self.min_lines:
            logger.warning(
                "Gemini returned %d caption lines (expected at least %d)",
                len(result.lines),
                self.min_lines,
            )
        return result
