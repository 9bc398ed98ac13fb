from typing import Optional

from ollama_supervisor.frameworks_drivers.config import ModelHostConfig
from ollama_supervisor.shared.logger import Logger
from ollama_supervisor.shared.process_runner import ProcessRunner
from ollama_supervisor.shared.protocols import ProcessRunnerProtocol

logger = Logger.get(__name__)


class ProcessProbe:
    """Detects whether the host executable is installed by asking it for its version."""

    def __init__(self, config: ModelHostConfig, runner: Optional[ProcessRunnerProtocol] = None):
        self.config = config
        self.runner = runner or ProcessRunner()

    async def is_installed(self) -> bool:
        # "Not installed" and "could not determine" are the same outcome here
        try:
            result = await self.runner.run([self.config.binary, "--version"])
        except Exception as e:
            logger.debug(f"Could not run {self.config.binary} --version: {e}")
            return False

        logger.debug(f"{self.config.binary} --version exited with {result.returncode}")
        return result.succeeded
