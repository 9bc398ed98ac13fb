from __future__ import annotations

import asyncio
import os
import subprocess
import threading
from dataclasses import dataclass

from ollama_supervisor.shared.logger import Logger

logger = Logger.get(__name__)


@dataclass
class ProcessResult:
    """Outcome of a command that was run to completion."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class ProcessRunner:
    """
    Runs host binary commands, either to completion or as a detached background process.

    Spawn failures (missing binary, permission denied) are raised as OSError;
    interpreting them is left to the caller.
    """

    async def run(self, cmd: list[str]) -> ProcessResult:
        """
        Run a command and wait for it to exit. No timeout is applied.

        Args:
            cmd: The command and its arguments.

        Returns:
            The exit status with captured stdout and stderr.
        """
        logger.debug(f"Running command: {' '.join(cmd)}")
        completed = await asyncio.to_thread(
            subprocess.run,
            cmd,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
        )
        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def spawn_detached(self, cmd: list[str]) -> subprocess.Popen:
        """
        Start a command in the background without waiting for it.

        The child gets no console window on Windows and its own session elsewhere,
        so it outlives the caller.
        """
        kwargs: dict = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
        }
        if os.name == "nt":
            kwargs["creationflags"] = (
                getattr(subprocess, "CREATE_NO_WINDOW", 0) | getattr(subprocess, "DETACHED_PROCESS", 0)
            )
        else:
            kwargs["start_new_session"] = True

        logger.info(f"Spawning detached process: {' '.join(cmd)}")
        process = subprocess.Popen(cmd, **kwargs)
        logger.info(f"Detached process started with PID {process.pid}")

        # Collect the exit status in the background so an early exit leaves no zombie
        threading.Thread(target=self._reap, args=(process,), name=f"reap-{process.pid}", daemon=True).start()
        return process

    @staticmethod
    def _reap(process: subprocess.Popen) -> None:
        returncode = process.wait()
        logger.debug(f"Detached process {process.pid} exited with {returncode}")
