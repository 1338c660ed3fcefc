"""Pydantic model for the optional yank configuration file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class YankConfig(BaseModel):
    """User configuration, read from ``config.json`` in the user config dir.

    Every field has a default, so an absent file means default behaviour.
    """

    data_file: Optional[Path] = Field(
        default=None,
        description="Override for the data file (default: ~/.yank/data.json).",
    )
    settle_delay_ms: int = Field(
        default=100,
        ge=0,
        le=5000,
        description="Pause after an in-process clipboard write, in milliseconds.",
    )
    helper_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Seconds to wait for an external clipboard helper.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the yank logger.",
    )

    model_config = {"extra": "forbid"}

    @field_validator("data_file")
    @classmethod
    def _expand_user(cls, value: Optional[Path]) -> Optional[Path]:
        return value.expanduser() if value is not None else None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def settle_delay(self) -> float:
        """Settle delay in seconds."""
        return self.settle_delay_ms / 1000
