import time
from typing import Any

import httpx

from ollama_supervisor.entities.model_record import ModelRecord
from ollama_supervisor.frameworks_drivers.config import ModelHostConfig
from ollama_supervisor.shared.errors import InventoryError
from ollama_supervisor.shared.logger import Logger
from ollama_supervisor.shared.protocols import ModelInventoryProtocol, ModelTagDTO

logger = Logger.get(__name__)


class ModelInventory(ModelInventoryProtocol):
    """
    Queries the running host for its locally available models.

    The inventory is best-effort: entries without a usable name are skipped
    instead of failing the whole listing.
    """

    def __init__(self, config: ModelHostConfig):
        self.config = config

    async def _fetch_tags(self) -> list[ModelTagDTO]:
        url = f"{self.config.base_url}/api/tags"
        start_time = time.time()
        timeout = httpx.Timeout(self.config.request_timeout)
        # The control endpoint is local; environment proxies must not intercept it
        async with httpx.AsyncClient(timeout=timeout, trust_env=False) as client:
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                elapsed = time.time() - start_time
                logger.error(f"Failed to connect to {url} after {elapsed:.2f}s: {e}")
                raise InventoryError(f"Failed to connect to Ollama: {e}") from e

        try:
            body: Any = response.json()
        except (ValueError, RecursionError) as e:
            # Pathologically nested bodies exhaust the decoder rather than failing to parse
            logger.error(f"Malformed response from {url}: {response.text[:200]}")
            raise InventoryError(f"Failed to parse response: {e}") from e

        logger.debug(f"Inventory response status: {response.status_code}, elapsed: {time.time() - start_time:.2f}s")
        if not isinstance(body, dict) or not isinstance(body.get("models"), list):
            return []
        return [entry for entry in body["models"] if self._has_usable_name(entry)]

    @staticmethod
    def _has_usable_name(entry: Any) -> bool:
        if not isinstance(entry, dict):
            return False
        name = entry.get("name")
        return isinstance(name, str) and bool(name)

    async def list_models(self) -> list[str]:
        """
        List the names of the models available on the host, in the order reported.

        Raises:
            InventoryError: If the endpoint is unreachable or the body is not JSON.
        """
        return [entry["name"] for entry in await self._fetch_tags()]

    async def list_model_records(self) -> list[ModelRecord]:
        """Same as list_models, keeping size and modification metadata where present."""
        return [
            ModelRecord(name=entry["name"], size=entry.get("size"), modified_at=entry.get("modified_at"))
            for entry in await self._fetch_tags()
        ]

    async def has_model(self, name: str) -> bool:
        """
        Check whether any available model starts with `name`.

        This is a literal, case-sensitive prefix match so that a bare family name
        like "llama3" matches tagged variants like "llama3:8b".
        """
        models = await self.list_models()
        return any(model.startswith(name) for model in models)
