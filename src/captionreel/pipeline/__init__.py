"""Render pipeline orchestration."""
