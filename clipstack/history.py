"""Most-recent-first clipboard history with de-duplication and a size limit."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<frac>\d+))?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})$"
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    text = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        text += f".{moment.microsecond:06d}"
    return text + "Z"


def _parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise ValueError(f"timestamp must be a string, got {text!r}")
    match = _TIMESTAMP.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp {text!r}")
    frac = (match["frac"] or "0")[:6].ljust(6, "0")
    tz = "+00:00" if match["tz"] == "Z" else match["tz"]
    return datetime.fromisoformat(f"{match['base']}.{frac}{tz}").astimezone(timezone.utc)


def _int_field(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field {key!r} must be a non-negative integer, got {value!r}")
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


@dataclass
class ClipboardEntry:
    """One piece of copied text."""

    id: int
    content: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "created_at": _format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClipboardEntry":
        data = _require_mapping(data, "entry")
        if "content" not in data or not isinstance(data["content"], str):
            raise ValueError("entry field 'content' must be a string")
        if "created_at" not in data:
            raise ValueError("missing field 'created_at'")
        return cls(
            id=_int_field(data, "id"),
            content=data["content"],
            created_at=_parse_timestamp(data["created_at"]),
        )


class History:
    """Clipboard entries, newest first, capped at ``max_size``."""

    def __init__(
        self,
        max_size: int,
        entries: Iterable[ClipboardEntry] = (),
        next_id: int = 1,
    ) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self.max_size = max_size
        self.next_id = next_id
        self._entries: list[ClipboardEntry] = list(entries)

    @property
    def entries(self) -> tuple[ClipboardEntry, ...]:
        """The entries, most recent first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def push(self, content: str) -> bool:
        """Record copied text; return whether the history changed.

        Text equal to the newest entry is ignored. Text found further down is
        moved to the front with a fresh timestamp. New text gets the next id,
        and the oldest entries are dropped beyond ``max_size``.
        """
        if self._entries and self._entries[0].content == content:
            return False

        existing = next((e for e in self._entries if e.content == content), None)
        if existing is not None:
            self._entries.remove(existing)
            existing.created_at = _now()
            self._entries.insert(0, existing)
            return True

        self._entries.insert(0, ClipboardEntry(self.next_id, content, _now()))
        self.next_id += 1
        del self._entries[self.max_size:]
        return True

    def get_by_id(self, entry_id: int) -> ClipboardEntry | None:
        """Return the entry with the given id, or None."""
        return next((e for e in self._entries if e.id == entry_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entries": [entry.to_dict() for entry in self._entries],
            "max_size": self.max_size,
            "next_id": self.next_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "History":
        """Build a history from a mapping; a missing ``next_id`` reads as 0."""
        data = _require_mapping(data, "history")
        raw_entries = data.get("entries")
        if not isinstance(raw_entries, list):
            raise ValueError("field 'entries' must be a list")
        next_id = _int_field(data, "next_id") if "next_id" in data else 0
        return cls(
            max_size=_int_field(data, "max_size"),
            entries=[ClipboardEntry.from_dict(item) for item in raw_entries],
            next_id=next_id,
        )