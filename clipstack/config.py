"""Application settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


def _non_negative_int(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"field {key!r} must not be negative, got {value}")
    return value


def _number(data: Mapping[str, Any], key: str) -> float:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


@dataclass(slots=True)
class Config:
    """Settings for the history size, clipboard polling and the picker window."""

    max_size: int = 100
    poll_interval_ms: int = 500
    window_width: float = 400.0
    window_height: float = 500.0

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a JSON-ready mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build settings from a mapping; every field is required."""
        if not isinstance(data, Mapping):
            raise ValueError(f"config must be a mapping, got {type(data).__name__}")
        return cls(
            max_size=_non_negative_int(data, "max_size"),
            poll_interval_ms=_non_negative_int(data, "poll_interval_ms"),
            window_width=_number(data, "window_width"),
            window_height=_number(data, "window_height"),
        )