from ollama_supervisor.entities.status_snapshot import StatusSnapshot
from ollama_supervisor.shared.errors import InventoryError
from ollama_supervisor.shared.logger import Logger
from ollama_supervisor.shared.protocols import ModelInventoryProtocol, ProcessProbeProtocol, ServerProbeProtocol

logger = Logger.get(__name__)


class GetStatus:
    """
    Builds a StatusSnapshot from the install probe, the liveness probe and the inventory.

    The probes run in order, and the inventory is only queried once the liveness
    probe has succeeded. An inventory failure degrades to an empty model list.
    """

    def __init__(self, process_probe: ProcessProbeProtocol, server_probe: ServerProbeProtocol,
                 model_inventory: ModelInventoryProtocol):
        self.process_probe = process_probe
        self.server_probe = server_probe
        self.model_inventory = model_inventory

    async def execute(self) -> StatusSnapshot:
        installed = await self.process_probe.is_installed()
        running = await self.server_probe.is_running()

        models: list[str] = []
        if running:
            try:
                models = await self.model_inventory.list_models()
            except InventoryError as e:
                logger.warning(f"Server is running but the inventory could not be read: {e}")
                models = []

        return StatusSnapshot(installed=installed, running=running, models=tuple(models))
