"""Prompt-to-captioned-video render service."""

__version__ = "0.1.0"
