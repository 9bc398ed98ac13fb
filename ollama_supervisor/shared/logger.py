import logging
import os

LOG_LEVEL_ENV = "OLLAMA_SUPERVISOR_LOG_LEVEL"


class Logger:
    """Utility class for standardized logging configuration."""

    @staticmethod
    def get(name: str) -> logging.Logger:
        """
        Get a standardized logger for the supervisor.
        Configures logging on first use if the root logger has no handlers yet;
        the level comes from OLLAMA_SUPERVISOR_LOG_LEVEL (default INFO).
        """
        if not logging.getLogger().hasHandlers():
            level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
            logging.basicConfig(
                level=getattr(logging, level, logging.INFO),
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )
        return logging.getLogger(name)
