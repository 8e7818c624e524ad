"""Base executor class and interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class FailureKind(str, Enum):
    TIMEOUT = "timeout"  # No response within the request timeout
    TRANSPORT = "transport"  # Connection, TLS or protocol error
    HTTP_STATUS = "http_status"  # Non-2xx response
    DECODE = "decode"  # Body is not the expected JSON shape


@dataclass
class ExecutionResult:
    """Result of a task execution."""
    success: bool
    started_at: datetime
    finished_at: datetime
    duration: float  # seconds
    output: Any = None
    error: Optional[str] = None
    error_kind: Optional[FailureKind] = None


class BaseExecutor(ABC):
    """Base class for task executors."""

    @abstractmethod
    async def execute(self, config: Dict[str, Any]) -> ExecutionResult:
        """Execute the task with given configuration."""
        pass

    def _finish(self, started_at: datetime, output: Any = None,
                error: Optional[str] = None,
                error_kind: Optional[FailureKind] = None) -> ExecutionResult:
        finished_at = datetime.now(timezone.utc)
        return ExecutionResult(
            success=error_kind is None,
            started_at=started_at,
            finished_at=finished_at,
            duration=(finished_at - started_at).total_seconds(),
            output=output,
            error=error,
            error_kind=error_kind
        )
