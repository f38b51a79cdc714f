from internal.logging import LogLevel, StructuredLogger, get_logger
from internal.health import HealthChecker, Status

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "HealthChecker",
    "Status",
]
