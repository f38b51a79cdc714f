"""Service errors with tracking IDs."""

from ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class BaseServiceError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "msg": self.args[0] if self.args else "",
            "context": self.context,
        }


class BatchLimitError(BaseServiceError):
    """Requested batch size is outside the configured bounds."""

    def __init__(self, requested, limit, **kwargs):
        context = kwargs.pop("context", {})
        context["requested"] = requested
        context["limit"] = limit
        super().__init__(f"count must be between 1 and {limit}, got {requested}", context=context, **kwargs)


class HealthCheckError(BaseServiceError):
    """Health check failures."""

    def __init__(self, message, component=None, **kwargs):
        context = kwargs.pop("context", {})
        if component:
            context["component"] = component
        super().__init__(message, context=context, **kwargs)
