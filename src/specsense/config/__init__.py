"""Config module exports."""

from specsense.config.loader import load_config
from specsense.config.models import (
    CompletionConfig,
    LoggingConfig,
    LogOutputConfig,
    SpecSenseConfig,
)

__all__ = [
    "load_config",
    "CompletionConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "SpecSenseConfig",
]
