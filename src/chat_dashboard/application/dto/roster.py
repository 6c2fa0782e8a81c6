"""Backend roster entries as a tagged union.

``GET /chats/all`` lists either bare employee names or partial records;
``parse_roster_entry`` turns one raw JSON item into the matching variant so
the normalizer can pattern-match instead of probing types.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class BareName:
    name: str


@dataclass(frozen=True, slots=True)
class PartialRecord:
    name: str
    last_message: str | None = None
    last_timestamp: str | None = None
    avatar: str | None = None
    online: bool | None = None


RosterEntry = BareName | PartialRecord


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def parse_roster_entry(raw: Any) -> RosterEntry | None:
    """Return the variant for *raw*, or None when it names no employee."""
    if isinstance(raw, str):
        return BareName(raw) if raw else None
    if isinstance(raw, dict):
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            return None
        online = raw.get("online")
        return PartialRecord(
            name=name,
            last_message=_str_or_none(raw.get("lastMessage")),
            last_timestamp=_str_or_none(raw.get("lastTimestamp")),
            avatar=_str_or_none(raw.get("avatar")),
            online=online if isinstance(online, bool) else None,
        )
    return None
