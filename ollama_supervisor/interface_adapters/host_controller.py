from fastapi import HTTPException

from ollama_supervisor.frameworks_drivers.download_page import DownloadPage
from ollama_supervisor.frameworks_drivers.model_fetcher import ModelFetcher
from ollama_supervisor.frameworks_drivers.server_launcher import ServerLauncher
from ollama_supervisor.shared.error_utils import ErrorUtils
from ollama_supervisor.shared.errors import ModelHostError
from ollama_supervisor.shared.protocols import ModelInventoryProtocol, ProcessProbeProtocol, ServerProbeProtocol
from ollama_supervisor.use_cases.get_readiness import GetReadiness
from ollama_supervisor.use_cases.get_status import GetStatus


class ModelHostController:
    """
    Command surface consumed by the presentation layer.

    check_installed, check_running, get_status and get_readiness always succeed. The other
    operations return an error response carrying the underlying cause when they fail.
    """

    def __init__(self, process_probe: ProcessProbeProtocol, server_probe: ServerProbeProtocol,
                 server_launcher: ServerLauncher, model_inventory: ModelInventoryProtocol,
                 model_fetcher: ModelFetcher, download_page: DownloadPage, get_status_use_case: GetStatus,
                 get_readiness_use_case: GetReadiness):
        self.process_probe = process_probe
        self.server_probe = server_probe
        self.server_launcher = server_launcher
        self.model_inventory = model_inventory
        self.model_fetcher = model_fetcher
        self.download_page = download_page
        self.get_status_use_case = get_status_use_case
        self.get_readiness_use_case = get_readiness_use_case

    async def check_installed(self) -> dict:
        return {"installed": await self.process_probe.is_installed()}

    async def check_running(self) -> dict:
        return {"running": await self.server_probe.is_running()}

    async def get_status(self) -> dict:
        snapshot = await self.get_status_use_case.execute()
        return snapshot.model_dump(mode="json")

    async def get_readiness(self) -> dict:
        readiness = await self.get_readiness_use_case.execute()
        return readiness.model_dump(mode="json")

    async def start_server(self) -> dict:
        try:
            await self.server_launcher.start()
        except ModelHostError as e:
            return ErrorUtils.from_host_error(e)
        return {"status": "started"}

    async def list_models(self) -> dict:
        try:
            return {"models": await self.model_inventory.list_models()}
        except ModelHostError as e:
            return ErrorUtils.from_host_error(e)

    async def list_model_records(self) -> dict:
        try:
            records = await self.model_inventory.list_model_records()
        except ModelHostError as e:
            return ErrorUtils.from_host_error(e)
        return {"models": [record.model_dump() for record in records]}

    async def has_model(self, name: str) -> dict:
        name = self._validate_model_name(name)
        try:
            available = await self.model_inventory.has_model(name)
        except ModelHostError as e:
            return ErrorUtils.from_host_error(e)
        return {"model": name, "available": available}

    async def pull_model(self, name: str) -> dict:
        name = self._validate_model_name(name)
        try:
            await self.model_fetcher.pull_model(name)
        except ModelHostError as e:
            return ErrorUtils.from_host_error(e)
        return {"model": name, "status": "pulled"}

    def open_download_page(self) -> dict:
        try:
            return {"url": self.download_page.open()}
        except ModelHostError as e:
            return ErrorUtils.from_host_error(e)

    def _validate_model_name(self, name) -> str:
        """Validate and sanitize a model name."""
        if not name or not isinstance(name, str) or not name.strip():
            raise HTTPException(status_code=400, detail="Model must be a non-empty string")
        return name.strip()
