"""Rendering engine — runs the Remotion CLI against a parameters file."""

import asyncio
import logging
import time
from pathlib import Path

from captionreel.config import get_settings
from captionreel.models.errors import InvocationError, RenderTimedOut
from captionreel.models.render import RenderJobOutcome

logger = logging.getLogger(__name__)


class RenderingEngine:
    """Launches one render subprocess per run and waits for it under a timeout."""

    def __init__(
        self,
        project_dir: Path | None = None,
        command: list[str] | None = None,
        timeout: float | None = None,
        max_concurrent: int | None = None,
    ):
        self.settings = get_settings()
        self.project_dir = project_dir or self.settings.render_project_dir
        self.command = command or list(self.settings.render_command)
        self.timeout = timeout if timeout is not None else self.settings.render_timeout_seconds
        self.kill_grace = self.settings.render_kill_grace_seconds
        self._slots = asyncio.Semaphore(max_concurrent or self.settings.max_concurrent_renders)

    def build_render_command(self, params_path: Path, output_path: Path) -> list[str]:
        """Build the render command as an argument list."""
        return [
            *self.command,
            self.settings.render_entry_point,
            self.settings.composition_id,
            str(Path(output_path).resolve()),
            f"--props={Path(params_path).resolve()}",
        ]

    async def invoke(self, params_path: Path, output_path: Path) -> RenderJobOutcome:
        """Run the render engine and collect its exit status and streams.

        A non-zero exit is reported through the returned outcome.

        Raises:
            InvocationError: the process could not be started.
            RenderTimedOut: the process ran past ``timeout`` and was killed.
        """
        project_dir = Path(self.project_dir)
        if not project_dir.is_dir():
            raise InvocationError(
                "Render project directory not found",
                details={"project_dir": str(project_dir)},
            )

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        cmd = self.build_render_command(params_path, output_path)

        async with self._slots:
            logger.info("Running: %s (timeout=%.0fs)", " ".join(cmd), self.timeout)
            start = time.monotonic()
            try:
                proc = await asyncio.create_subprocess_exec(
                    *cmd,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    cwd=str(project_dir),
                )
            except OSError as e:
                logger.error("Failed to launch render engine %r: %s", cmd[0], e)
                raise InvocationError(
                    f"Could not launch render engine: {e.strerror or e}",
                    details={"command": cmd[0], "error": str(e)},
                ) from e

            try:
                stdout_bytes, stderr_bytes = await asyncio.wait_for(
                    proc.communicate(), timeout=self.timeout
                )
            except asyncio.TimeoutError:
                logger.warning("Render timed out after %.0fs, terminating", self.timeout)
                await self._terminate(proc)
                output_path.unlink(missing_ok=True)
                raise RenderTimedOut(
                    f"Render exceeded {self.timeout:.0f}s and was terminated",
                    details={"timeout_seconds": self.timeout},
                )
            except asyncio.CancelledError:
                logger.warning("Render cancelled, killing process %s", proc.pid)
                if proc.returncode is None:
                    proc.kill()
                    await proc.wait()
                output_path.unlink(missing_ok=True)
                raise

        elapsed = time.monotonic() - start
        outcome = RenderJobOutcome(
            exit_code=proc.returncode if proc.returncode is not None else -1,
            stdout=stdout_bytes.decode("utf-8", errors="replace"),
            stderr=stderr_bytes.decode("utf-8", errors="replace"),
            duration_seconds=round(elapsed, 2),
            command=cmd,
        )
        if outcome.succeeded:
            logger.info("Render completed in %.1fs", elapsed)
        else:
            logger.error(
                "Render engine exited with code %d: %s",
                outcome.exit_code,
                outcome.stderr_excerpt(self.settings.stderr_excerpt_chars),
            )
        return outcome

    async def _terminate(self, proc: asyncio.subprocess.Process) -> None:
        """SIGTERM, wait ``kill_grace`` seconds, then SIGKILL."""
        if proc.returncode is not None:
            return
        proc.terminate()
        try:
            await asyncio.wait_for(proc.wait(), timeout=self.kill_grace)
        except asyncio.TimeoutError:
            logger.warning("Render process did not exit after SIGTERM, sending SIGKILL")
            proc.kill()
            await proc.wait()
