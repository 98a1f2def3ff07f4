"""Typed extraction of caption text from a Gemini response."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of pulling caption text out of an upstream response.

    Exactly one of ``text`` / ``reason`` is set.
    """

    text: str | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None

    @classmethod
    def success(cls, text: str) -> "ExtractionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, reason: str) -> "ExtractionResult":
        return cls(reason=reason)


def _field(node: Any, name: str) -> Any:
    """Read *name* from a mapping or an SDK object, returning None when absent."""
    if node is None:
        return None
    if isinstance(node, dict):
        return node.get(name)
    return getattr(node, name, None)


def _first(node: Any) -> Any:
    if isinstance(node, (list, tuple)) and node:
        return node[0]
    return None


def extract_caption_text(response: Any) -> ExtractionResult:
    """Extract ``candidates[0].content.parts[0].text`` from a response.

    Accepts either the google-genai ``GenerateContentResponse`` or its
    plain-dict form. Never raises; a missing step in the path is reported
    through ``ExtractionResult.reason``.
    """
    candidate = _first(_field(response, "candidates"))
    if candidate is None:
        return ExtractionResult.failure("response has no candidates")

    content = _field(candidate, "content")
    if content is None:
        return ExtractionResult.failure("first candidate has no content")

    part = _first(_field(content, "parts"))
    if part is None:
        return ExtractionResult.failure("first candidate content has no parts")

    text = _field(part, "text")
    if not isinstance(text, str):
        return ExtractionResult.failure("first content part has no text")
    text = text.strip()
    if not text:
        return ExtractionResult.failure("first content part text is empty")

    return ExtractionResult.success(text)
