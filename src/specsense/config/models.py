"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SPECSENSE__SECTION__KEY)
3. Repo YAML (.specsense/config.yaml)
4. Global YAML (~/.config/specsense/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SPECSENSE__<SECTION>__<KEY>=<VALUE>

Examples:
    SPECSENSE__LOGGING__LEVEL=DEBUG
    SPECSENSE__COMPLETION__MATCH_MODE=prefix
    SPECSENSE__COMPLETION__MAX_RESULTS=50
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
MatchMode = Literal["fuzzy", "prefix"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SPECSENSE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every resolution step.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CompletionConfig(BaseModel):
    """Completion behavior.

    Env vars:
        SPECSENSE__COMPLETION__MATCH_MODE: Name matcher (fuzzy, prefix)
        SPECSENSE__COMPLETION__MAX_RESULTS: Cap on displayed candidates
    """

    match_mode: MatchMode = Field(
        default="fuzzy",
        description="fuzzy: anchored case-insensitive subsequence. "
        "prefix: case-sensitive startswith.",
    )
    max_results: int | None = Field(
        default=None,
        description="Maximum candidates shown by the CLI. None shows everything.",
    )

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"max_results must be >= 1, got {v}")
        return v


class SpecSenseConfig(BaseModel):
    """Root configuration for specsense.

    All settings can be configured via:
    1. Environment variables: SPECSENSE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    completion: CompletionConfig = Field(default_factory=CompletionConfig)
