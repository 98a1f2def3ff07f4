"""Caption generation via the Gemini API."""

from captionreel.captions.generator import CaptionGenerator
from captionreel.captions.parser import ExtractionResult, extract_caption_text

__all__ = ["CaptionGenerator", "ExtractionResult", "extract_caption_text"]
