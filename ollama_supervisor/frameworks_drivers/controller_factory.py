from typing import Optional

from ollama_supervisor.frameworks_drivers.config import Config
from ollama_supervisor.frameworks_drivers.download_page import DownloadPage
from ollama_supervisor.frameworks_drivers.model_fetcher import ModelFetcher
from ollama_supervisor.frameworks_drivers.model_inventory import ModelInventory
from ollama_supervisor.frameworks_drivers.process_probe import ProcessProbe
from ollama_supervisor.frameworks_drivers.server_launcher import ServerLauncher
from ollama_supervisor.frameworks_drivers.server_probe import ServerProbe
from ollama_supervisor.interface_adapters.host_controller import ModelHostController
from ollama_supervisor.shared.process_runner import ProcessRunner
from ollama_supervisor.shared.protocols import ProcessRunnerProtocol
from ollama_supervisor.use_cases.get_readiness import GetReadiness
from ollama_supervisor.use_cases.get_status import GetStatus


class ControllerFactory:
    def __init__(self, config: Config, runner: Optional[ProcessRunnerProtocol] = None):
        self.config = config
        self.runner = runner or ProcessRunner()

    def create_controller(self) -> ModelHostController:
        host_config = self.config.ollama

        process_probe = ProcessProbe(host_config, self.runner)
        server_probe = ServerProbe(host_config)
        model_inventory = ModelInventory(host_config)
        get_status = GetStatus(process_probe, server_probe, model_inventory)

        return ModelHostController(
            process_probe=process_probe,
            server_probe=server_probe,
            server_launcher=ServerLauncher(host_config, self.runner),
            model_inventory=model_inventory,
            model_fetcher=ModelFetcher(host_config, self.runner),
            download_page=DownloadPage(host_config),
            get_status_use_case=get_status,
            get_readiness_use_case=GetReadiness(get_status, host_config.required_model),
        )
