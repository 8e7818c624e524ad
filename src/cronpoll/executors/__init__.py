"""Task executors."""

from .base import BaseExecutor, ExecutionResult, FailureKind
from .http_executor import HTTPExecutor

__all__ = [
    "BaseExecutor",
    "ExecutionResult",
    "FailureKind",
    "HTTPExecutor"
]
