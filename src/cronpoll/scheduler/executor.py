"""Poll job run by the scheduler on every fire time."""

from typing import Optional
import logging

from ..executors import BaseExecutor, ExecutionResult

logger = logging.getLogger(__name__)


class PollJob:
    """Fetches a JSON endpoint and logs what it returned."""

    def __init__(self, executor: BaseExecutor, url: str, timeout: Optional[float] = None):
        self.executor = executor
        self.url = url
        self.timeout = timeout

    async def __call__(self) -> ExecutionResult:
        config = {"url": self.url}
        if self.timeout is not None:
            config["timeout"] = self.timeout

        result = await self.executor.execute(config)

        if result.success:
            logger.info(f"{self.url} -> {result.output}")
        else:
            logger.warning(f"Poll of {self.url} failed ({result.error_kind.value}): {result.error}")
        return result
