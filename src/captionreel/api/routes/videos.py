"""Rendered video retrieval."""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from captionreel.api.dependencies import get_app_settings
from captionreel.config import Settings
from captionreel.models.errors import ArtifactNotFound

router = APIRouter(prefix="/videos", tags=["videos"])


def resolve_artifact(videos_dir: Path, name: str) -> Path:
    """Map a public video name onto a file inside *videos_dir*.

    Raises ArtifactNotFound for anything that is not an existing ``.mp4``
    directly under the videos directory.
    """
    if not name or Path(name).name != name or not name.endswith(".mp4"):
        raise ArtifactNotFound(f"Video {name!r} not found")

    root = videos_dir.resolve()
    path = (root / name).resolve()
    if path.parent != root or not path.is_file():
        raise ArtifactNotFound(f"Video {name!r} not found")
    return path


@router.get("/{name}")
async def get_video(name: str, settings: Settings = Depends(get_app_settings)):
    """Serve a previously rendered video."""
    path = resolve_artifact(Path(settings.videos_dir), name)
    return FileResponse(path=path, media_type="video/mp4")
