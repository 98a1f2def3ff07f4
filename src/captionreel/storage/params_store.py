"""Render parameter persistence (JSON side-channel)."""

import asyncio
import logging
from pathlib import Path

from captionreel.config import get_settings
from captionreel.models.errors import StoreWriteFailed
from captionreel.models.render import RenderParameters

logger = logging.getLogger(__name__)


class RenderParameterStore:
    """Writes one JSON parameters document per render run."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = base_dir or get_settings().params_dir

    def path_for(self, job_id: str) -> Path:
        return self.base_dir / f"{job_id}.json"

    async def persist(self, parameters: RenderParameters) -> Path:
        """Serialize *parameters* and return the document's location.

        Raises:
            StoreWriteFailed: on any I/O error.
        """
        path = self.path_for(parameters.job_id)
        payload = parameters.model_dump_json(by_alias=True, indent=2)
        try:
            await asyncio.to_thread(self._write, path, payload)
        except OSError as e:
            logger.error("Failed to write render parameters to %s: %s", path, e)
            raise StoreWriteFailed(
                "Failed to persist render parameters",
                details={"path": str(path), "error": str(e)},
            ) from e
        logger.info("Render parameters written: %s", path)
        return path

    def _write(self, path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")

    def discard(self, job_id: str) -> None:
        """Remove a run's parameters document if present."""
        self.path_for(job_id).unlink(missing_ok=True)
