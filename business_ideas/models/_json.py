"""Serialisation helpers for SQLite JSON text columns."""

from __future__ import annotations

import copy
import json
from typing import Any, Optional


def dump_json(value: Any, default: Any) -> str:
    """Serialise *value*, substituting *default* when it is ``None``."""
    return json.dumps(default if value is None else value)


def load_json(raw: Optional[str], default: Any) -> Any:
    """Parse a JSON column; absent or malformed text yields a copy of *default*."""
    if not raw:
        return copy.deepcopy(default)
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return copy.deepcopy(default)
    return copy.deepcopy(default) if value is None else value
