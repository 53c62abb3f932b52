"""Compact JSON output for catalogue data."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from .models import Variety


def _normalize(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, dict):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def dumps_compact(value: Any) -> bytes:
    """Encode as compact UTF-8 JSON without HTML escaping or a trailing newline."""
    text = json.dumps(
        _normalize(value), ensure_ascii=False, separators=(",", ":"), allow_nan=False
    )
    text = text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    return text.encode("utf-8")


def save_json_exact(variety: Variety, filename: str | Path) -> Path:
    """Write the variety to exactly this path."""
    if not variety.product:
        raise ValueError("len(variety.Product) = 0")
    path = Path(filename)
    path.write_bytes(dumps_compact(variety))
    return path


def save_json(variety: Variety, filename: str | Path) -> Path:
    """Write the variety to filename + '.json'."""
    return save_json_exact(variety, f"{filename}.json")