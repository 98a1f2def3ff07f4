"""Command-line entry point: bootstrap checks, then serve the API."""

import logging
import sys

import uvicorn

from captionreel.config import Settings, get_settings

logger = logging.getLogger(__name__)


def check_credentials(settings: Settings) -> bool:
    """Return True when the Gemini credential is configured."""
    if not settings.gemini_api_key:
        logger.error("GEMINI_API_KEY environment variable is not set")
        return False
    return True


def prepare_directories(settings: Settings) -> None:
    """Create the artifact directories the pipeline writes into."""
    settings.videos_dir.mkdir(parents=True, exist_ok=True)
    settings.params_dir.mkdir(parents=True, exist_ok=True)


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not check_credentials(settings):
        return 1
    prepare_directories(settings)

    from captionreel.api.app import app

    logger.info("Server starting on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
