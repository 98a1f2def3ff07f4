"""Render engine invocation."""
