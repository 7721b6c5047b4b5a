"""Tests for config/models.py."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from specsense.config.models import (
    CompletionConfig,
    LoggingConfig,
    LogOutputConfig,
    SpecSenseConfig,
)


class TestLogOutputConfig:
    """Log output destination validation."""

    @pytest.mark.parametrize("destination", ["stderr", "stdout"])
    def test_console_destinations_accepted(self, destination: str) -> None:
        assert LogOutputConfig(destination=destination).destination == destination

    def test_absolute_file_destination_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "specsense.log"
        assert LogOutputConfig(destination=str(path)).destination == str(path)

    def test_relative_file_destination_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="logs/specsense.log")


class TestCompletionConfig:
    """Completion settings validation."""

    def test_defaults(self) -> None:
        config = CompletionConfig()
        assert config.match_mode == "fuzzy"
        assert config.max_results is None

    def test_unknown_match_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CompletionConfig(match_mode="regex")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_max_results_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            CompletionConfig(max_results=value)


class TestSpecSenseConfig:
    """Root config composition."""

    def test_sections_default(self) -> None:
        config = SpecSenseConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.completion, CompletionConfig)
        assert len(config.logging.outputs) == 1
