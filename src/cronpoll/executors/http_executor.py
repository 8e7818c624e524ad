"""HTTP task executor."""

import httpx
from datetime import datetime, timezone
from typing import Any, Dict
import logging
from pydantic import ValidationError

from ..models import parse_ip_response
from .base import BaseExecutor, ExecutionResult, FailureKind

logger = logging.getLogger(__name__)


class HTTPExecutor(BaseExecutor):
    """Executor for HTTP/HTTPS GET requests returning a JSON object of strings."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    async def execute(self, config: Dict[str, Any]) -> ExecutionResult:
        """Execute an HTTP GET based on configuration.

        Config structure:
        {
            "url": "https://httpbin.org/ip",
            "headers": {"Accept": "application/json"},
            "params": {"query": "param"},  # URL query parameters
            "timeout": 30  # seconds, overrides the executor default
        }
        """
        started_at = datetime.now(timezone.utc)

        url = config.get("url")
        if not url:
            raise ValueError("URL is required for HTTP task")

        timeout = config.get("timeout", self.timeout)
        request_args = {
            "headers": config.get("headers") or {},
            "timeout": timeout
        }
        if config.get("params"):
            request_args["params"] = config["params"]

        try:
            async with httpx.AsyncClient() as client:
                logger.debug(f"Executing HTTP GET request to {url}")
                response = await client.get(url, **request_args)

        except httpx.TimeoutException:
            error_msg = f"Request timeout after {timeout} seconds"
            logger.debug(error_msg)
            return self._finish(started_at, error=error_msg, error_kind=FailureKind.TIMEOUT)

        except httpx.HTTPError as e:
            error_msg = f"HTTP request failed: {e}"
            logger.debug(error_msg)
            return self._finish(started_at, error=error_msg, error_kind=FailureKind.TRANSPORT)

        if not 200 <= response.status_code < 300:
            error_msg = f"HTTP {response.status_code}"
            logger.debug(f"HTTP request to {url} returned status {response.status_code}")
            return self._finish(started_at, error=error_msg, error_kind=FailureKind.HTTP_STATUS)

        try:
            body = parse_ip_response(response.text)
        except ValidationError as e:
            error_msg = f"Invalid response body: {e.errors()[0]['msg']}"
            logger.debug(f"HTTP request to {url} returned an unreadable body: {e}")
            return self._finish(started_at, error=error_msg, error_kind=FailureKind.DECODE)

        logger.debug(f"HTTP request completed with status {response.status_code}")
        return self._finish(started_at, output=body)
