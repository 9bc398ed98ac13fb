import webbrowser

from ollama_supervisor.frameworks_drivers.config import ModelHostConfig
from ollama_supervisor.shared.errors import BrowserOpenError
from ollama_supervisor.shared.logger import Logger

logger = Logger.get(__name__)


class DownloadPage:
    """Hands the host's download page to the default browser."""

    def __init__(self, config: ModelHostConfig):
        self.config = config

    def open(self) -> str:
        url = self.config.download_url
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as e:
            raise BrowserOpenError(f"Failed to open {url}: {e}") from e

        if not opened:
            raise BrowserOpenError(f"Failed to open {url}: no browser available")

        logger.info(f"Opened download page: {url}")
        return url
