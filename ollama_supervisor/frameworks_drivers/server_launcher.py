import asyncio
from typing import Optional

from ollama_supervisor.frameworks_drivers.config import ModelHostConfig
from ollama_supervisor.shared.errors import ServerStartError
from ollama_supervisor.shared.logger import Logger
from ollama_supervisor.shared.process_runner import ProcessRunner
from ollama_supervisor.shared.protocols import ProcessRunnerProtocol

logger = Logger.get(__name__)


class ServerLauncher:
    """
    Starts the host server as a detached background process.

    Starting a server that is already running is not treated as an error here;
    the host binary decides what happens to a duplicate. Concurrent calls are
    not serialized.
    """

    def __init__(self, config: ModelHostConfig, runner: Optional[ProcessRunnerProtocol] = None):
        self.config = config
        self.runner = runner or ProcessRunner()

    async def start(self) -> None:
        """
        Spawn `<binary> serve` and wait for the warm-up delay.

        The delay is best-effort: the control endpoint may still be unreachable
        when this returns, and callers needing certainty must re-probe.

        Raises:
            ServerStartError: If the process could not be spawned.
        """
        cmd = [self.config.binary, "serve"]
        try:
            process = self.runner.spawn_detached(cmd)
        except OSError as e:
            logger.error(f"Failed to start {self.config.binary}: {e}")
            raise ServerStartError(f"Failed to start Ollama: {e}") from e

        # The handle is not kept: the launcher holds no state and the runner reaps the child
        logger.info(f"Started {self.config.binary} serve with PID {process.pid}, waiting {self.config.warmup_delay:.1f}s to warm up")
        await asyncio.sleep(self.config.warmup_delay)
