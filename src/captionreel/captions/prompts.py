"""Instruction template for caption generation."""

CAPTION_INSTRUCTIONS = (
    "Make a caption script for a TikTok-style video using React Remotion. "
    "only 1 suggestion. "
    "Generate subtitles only, with at least {min_lines} creative lines, "
    "and no timestamps."
)


def build_caption_prompt(prompt_text: str, min_lines: int = 6) -> str:
    """Combine the fixed caption instructions with the user's prompt."""
    instructions = CAPTION_INSTRUCTIONS.format(min_lines=min_lines)
    return f"{instructions}\n\nPrompt: {prompt_text}"
