import asyncio

import requests

from ollama_supervisor.shared.logger import Logger

logger = Logger.get(__name__)


class HealthChecker:
    """
    Liveness checks against the model host's local control endpoint.
    """

    @staticmethod
    def _get(url: str, timeout: float) -> requests.Response:
        # trust_env is off so HTTP(S)_PROXY never reroutes a localhost check
        with requests.Session() as session:
            session.trust_env = False
            return session.get(url, timeout=timeout)

    @staticmethod
    async def check_http_endpoint(host: str, port: int, endpoint: str = "/api/tags", timeout: float = 2.0) -> bool:
        """
        Report whether the control endpoint answers with a 2xx within `timeout`.

        Refused connections, timeouts, non-2xx statuses and any other failure all
        read as "not up"; nothing is raised.

        Args:
            host: Control endpoint host
            port: Control endpoint port
            endpoint: Route to probe (default: the tag listing)
            timeout: Hard bound on the request in seconds

        Returns:
            True only for a 2xx response
        """
        url = f"http://{host}:{port}{endpoint}"
        try:
            response = await asyncio.to_thread(HealthChecker._get, url, timeout)
        except Exception as e:
            logger.debug(f"Model host not reachable at {url}: {e}")
            return False

        if 200 <= response.status_code < 300:
            logger.debug(f"Model host is up at {url}")
            return True
        logger.warning(f"Model host at {url} answered with status {response.status_code}")
        return False
