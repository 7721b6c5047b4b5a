"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence: defaults < global < repo < env < kwargs
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from specsense.config import loader
from specsense.config.loader import _deep_merge, _load_yaml, load_config
from specsense.core.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config at an empty temp location."""
    global_path = tmp_path / "global" / "config.yaml"
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", global_path)
    for var in ("SPECSENSE__LOGGING__LEVEL", "SPECSENSE__COMPLETION__MATCH_MODE"):
        monkeypatch.delenv(var, raising=False)
    return global_path


def _write_repo_config(repo: Path, content: str) -> None:
    config_dir = repo / ".specsense"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.yaml").write_text(content)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_yaml_null(self, tmp_path: Path) -> None:
        """Returns empty dict for YAML containing null."""
        yaml_file = tmp_path / "null.yaml"
        yaml_file.write_text("null\n")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is not a config document."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        """Override values replace base values."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"completion": {"match_mode": "prefix", "max_results": 10}}
        override = {"completion": {"max_results": 5}}
        result = _deep_merge(base, override)
        assert result == {"completion": {"match_mode": "prefix", "max_results": 5}}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict override replaces dict base."""
        base: dict[str, Any] = {"a": {"nested": 1}}
        assert _deep_merge(base, {"a": 2}) == {"a": 2}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self, tmp_path: Path) -> None:
        """No files and no env vars gives built-in defaults."""
        config = load_config(tmp_path)
        assert config.logging.level == "INFO"
        assert config.completion.match_mode == "fuzzy"
        assert config.completion.max_results is None

    def test_repo_yaml_applies(self, tmp_path: Path) -> None:
        """Repo config file overrides defaults."""
        _write_repo_config(tmp_path, "completion:\n  match_mode: prefix\n")
        assert load_config(tmp_path).completion.match_mode == "prefix"

    def test_repo_yaml_overrides_global(
        self, tmp_path: Path, isolated_global_config: Path
    ) -> None:
        """Repo config wins over global config, untouched keys survive."""
        isolated_global_config.parent.mkdir(parents=True)
        isolated_global_config.write_text(
            "completion:\n  match_mode: prefix\n  max_results: 7\nlogging:\n  level: ERROR\n"
        )
        _write_repo_config(tmp_path, "completion:\n  match_mode: fuzzy\n")

        config = load_config(tmp_path)

        assert config.completion.match_mode == "fuzzy"
        assert config.completion.max_results == 7
        assert config.logging.level == "ERROR"

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables win over YAML files."""
        _write_repo_config(tmp_path, "logging:\n  level: WARNING\n")
        monkeypatch.setenv("SPECSENSE__LOGGING__LEVEL", "DEBUG")

        assert load_config(tmp_path).logging.level == "DEBUG"

    def test_kwargs_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Direct kwargs have the highest precedence."""
        monkeypatch.setenv("SPECSENSE__COMPLETION__MATCH_MODE", "prefix")

        config = load_config(tmp_path, completion={"match_mode": "fuzzy"})

        assert config.completion.match_mode == "fuzzy"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        """Validation failures surface as ConfigError with the field path."""
        _write_repo_config(tmp_path, "completion:\n  max_results: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert "completion" in exc_info.value.details["field"]
