"""Configuration loader for yank.

Loads the JSON configuration file and returns a validated YankConfig.
Uses module-level caching so the config is only parsed once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import ValidationError

from yank.config.models import YankConfig
from yank.domain.errors import ConfigurationError

_APP_NAME = "yank"
_CONFIG_FILENAME = "config.json"

# Module-level cache
_config_cache: dict[str, YankConfig] = {}


def default_config_path() -> Path:
    """``config.json`` inside the platform's user config directory."""
    return Path(platformdirs.user_config_dir(_APP_NAME)) / _CONFIG_FILENAME


def load_config(path: Optional[Path] = None) -> YankConfig:
    """Load and validate the yank config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Explicit config file. If ``None``, the default location is used
        and a missing file simply yields the defaults.

    Returns
    -------
    YankConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If an explicit path does not exist, or the file is not valid JSON
        or does not match the schema.
    """
    explicit = path is not None
    config_path = path if path is not None else default_config_path()
    cache_key = str(config_path.expanduser().resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        if explicit:
            raise ConfigurationError(f"config file not found: {config_path}")
        config = YankConfig()
    else:
        try:
            raw = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigurationError(f"{config_path}: {exc}") from exc
        try:
            config = YankConfig.model_validate(raw)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'config'}: {err['msg']}"
                for err in exc.errors()
            )
            raise ConfigurationError(f"{config_path}: {details}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> YankConfig:
    """Get the default yank configuration (cached)."""
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
