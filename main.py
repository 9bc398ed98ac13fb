import os
from pathlib import Path

import uvicorn

from ollama_supervisor.frameworks_drivers.config import Config
from ollama_supervisor.frameworks_drivers.controller_factory import ControllerFactory
from ollama_supervisor.interface_adapters.api import API
from ollama_supervisor.shared.logger import Logger

if __name__ == "__main__":
    logger = Logger.get(__name__)

    try:
        config_path = os.environ.get("OLLAMA_SUPERVISOR_CONFIG", "config.json")
        if Path(config_path).exists():
            config = Config.load(config_path)
        else:
            logger.info(f"No configuration file at {config_path}, using defaults")
            config = Config()

        # Override host binary if set in environment
        if "OLLAMA_SUPERVISOR_BINARY" in os.environ:
            config.ollama.binary = os.environ["OLLAMA_SUPERVISOR_BINARY"]

        # Instantiate dependencies
        host_controller = ControllerFactory(config).create_controller()
        api = API(host_controller)

        logger.info(f"Starting Ollama Supervisor for {config.ollama.base_url}...")
        uvicorn.run(api.app, host=config.server.host, port=config.server.port)
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise
