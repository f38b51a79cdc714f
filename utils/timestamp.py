"""Timestamp helpers for log records and KSUID inspection."""

import time
from datetime import datetime, timezone

_ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_datetime(dt):
    """Format an aware datetime as ISO 8601 UTC with microseconds."""
    return dt.astimezone(timezone.utc).strftime(_ISO_FORMAT) + "Z"


def format_timestamp(epoch_us=None):
    """Format a microsecond epoch timestamp (default now) as ISO 8601."""
    if epoch_us is None:
        epoch_us = now_micros()
    seconds, micros = divmod(epoch_us, 1_000_000)
    return format_datetime(datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros))
