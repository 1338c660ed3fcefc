"""Typed snapshot of the on-disk store document.

The data file must hold a JSON object mapping keys to strings. Values
written by hand as numbers or booleans are coerced to their JSON text
(``1`` -> ``"1"``, ``true`` -> ``"true"``); ``null``, arrays and nested
objects are rejected.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import RootModel, model_validator


def _coerce_value(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    # bool is a subclass of int, json.dumps renders it as true/false
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    kind = "null" if value is None else type(value).__name__
    raise ValueError(
        f"value for key '{key}' must be a string, number or boolean, got {kind}"
    )


class StoreData(RootModel[dict[str, str]]):
    """Validated ``key -> value`` mapping read from the data file."""

    root: dict[str, str]

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            kind = "null" if data is None else type(data).__name__
            raise ValueError(f"expected a JSON object at the top level, got {kind}")
        return {key: _coerce_value(key, value) for key, value in data.items()}
