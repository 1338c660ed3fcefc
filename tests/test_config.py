"""Tests for the yank configuration system."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from yank.config.loader import clear_cache, default_config_path, get_config, load_config
from yank.config.models import YankConfig
from yank.domain.errors import ConfigurationError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestYankConfigModel:
    def test_defaults(self):
        cfg = YankConfig()
        assert cfg.data_file is None
        assert cfg.settle_delay_ms == 100
        assert cfg.settle_delay == 0.1
        assert cfg.helper_timeout == 5.0
        assert cfg.log_level == "WARNING"

    def test_log_level_is_normalised(self):
        assert YankConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            YankConfig(log_level="chatty")

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            YankConfig(settle_delay_ms=-1)

    def test_zero_timeout_rejected(self):
        with pytest.raises(ValidationError):
            YankConfig(helper_timeout=0)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            YankConfig.model_validate({"colour": "blue"})

    def test_data_file_expands_user(self):
        cfg = YankConfig(data_file="~/stash.json")
        assert cfg.data_file == Path("~/stash.json").expanduser()


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_default_path_is_named_config_json(self):
        assert default_config_path().name == "config.json"

    def test_missing_default_file_gives_defaults(self, tmp_path: Path):
        with patch(
            "yank.config.loader.default_config_path",
            return_value=tmp_path / "absent.json",
        ):
            assert get_config() == YankConfig()

    def test_missing_explicit_file_is_an_error(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "absent.json")

    def test_loads_values(self, tmp_path: Path):
        path = _write(
            tmp_path / "config.json",
            {"data_file": str(tmp_path / "d.json"), "settle_delay_ms": 0, "log_level": "info"},
        )
        cfg = load_config(path)
        assert cfg.data_file == tmp_path / "d.json"
        assert cfg.settle_delay_ms == 0
        assert cfg.log_level == "INFO"

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(path)

    def test_schema_violation_names_field(self, tmp_path: Path):
        path = _write(tmp_path / "config.json", {"helper_timeout": -3})
        with pytest.raises(ConfigurationError, match="helper_timeout"):
            load_config(path)

    def test_non_object_document(self, tmp_path: Path):
        path = _write(tmp_path / "config.json", ["not", "an", "object"])
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_result_is_cached(self, tmp_path: Path):
        path = _write(tmp_path / "config.json", {"settle_delay_ms": 5})
        first = load_config(path)
        _write(path, {"settle_delay_ms": 50})
        assert load_config(path) is first

    def test_clear_cache_reloads(self, tmp_path: Path):
        path = _write(tmp_path / "config.json", {"settle_delay_ms": 5})
        load_config(path)
        _write(path, {"settle_delay_ms": 50})
        clear_cache()
        assert load_config(path).settle_delay_ms == 50
