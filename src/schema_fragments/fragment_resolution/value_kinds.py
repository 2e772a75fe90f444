"""Closed classification of raw document values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Kind of a raw structural value loaded from a document."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    STRING = "string"
    BOOLEAN = "boolean"
    SCALAR = "scalar"


def kind_of(value: Any) -> ValueKind:
    # str is a Sequence and bool is an int, so the order of checks matters.
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def key_text(key: Any) -> str:
    """Render a mapping key the way it appears as a path segment."""
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)
