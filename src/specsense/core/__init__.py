"""Core module exports."""

from specsense.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    SnapshotError,
    SpecSenseError,
)
from specsense.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "SnapshotError",
    "SpecSenseError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
