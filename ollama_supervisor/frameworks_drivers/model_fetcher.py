from typing import Optional

from ollama_supervisor.frameworks_drivers.config import ModelHostConfig
from ollama_supervisor.shared.errors import ModelPullError
from ollama_supervisor.shared.logger import Logger
from ollama_supervisor.shared.process_runner import ProcessRunner
from ollama_supervisor.shared.protocols import ProcessRunnerProtocol

logger = Logger.get(__name__)


class ModelFetcher:
    """Downloads models by running the host's pull subcommand to completion."""

    def __init__(self, config: ModelHostConfig, runner: Optional[ProcessRunnerProtocol] = None):
        self.config = config
        self.runner = runner or ProcessRunner()

    async def pull_model(self, name: str) -> None:
        """
        Pull a model, blocking until the host process exits. Downloads can be
        arbitrarily long, so no timeout is applied.

        Raises:
            ModelPullError: If the process could not be spawned or exited non-zero.
                The host's stderr is included verbatim.
        """
        logger.info(f"Pulling model {name}")
        try:
            result = await self.runner.run([self.config.binary, "pull", name])
        except OSError as e:
            logger.error(f"Could not run {self.config.binary} pull {name}: {e}")
            raise ModelPullError(f"Failed to pull model: {e}") from e

        if not result.succeeded:
            logger.error(f"Pull of {name} exited with {result.returncode}: {result.stderr.strip()}")
            raise ModelPullError(f"Failed to pull model: {result.stderr}")

        logger.info(f"Pulled model {name}")
