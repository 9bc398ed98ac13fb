from ollama_supervisor.frameworks_drivers.config import ModelHostConfig
from ollama_supervisor.shared.health_checker import HealthChecker

TAGS_ENDPOINT = "/api/tags"


class ServerProbe:
    """Detects whether the host server is accepting connections on its control endpoint."""

    def __init__(self, config: ModelHostConfig):
        self.config = config

    async def is_running(self) -> bool:
        return await HealthChecker.check_http_endpoint(
            self.config.host, self.config.port, TAGS_ENDPOINT, self.config.probe_timeout
        )
