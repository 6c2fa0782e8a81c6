from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from chat_dashboard.application.dto.roster import (
    BareName,
    PartialRecord,
    RosterEntry,
    parse_roster_entry,
)
from chat_dashboard.config import settings
from chat_dashboard.domain.entities.employee import Employee

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def avatar_url(name: str, base_url: str | None = None) -> str:
    """Deterministic avatar location for *name*."""
    base = base_url or settings.AVATAR_BASE_URL
    return f"{base}?name={quote(name, safe=_URI_COMPONENT_SAFE)}"


def to_employee(entry: RosterEntry, avatar_base_url: str | None = None) -> Employee:
    match entry:
        case BareName(name=name):
            return Employee(
                name=name,
                last_message="",
                last_timestamp="",
                avatar=avatar_url(name, avatar_base_url),
                online=False,
            )
        case PartialRecord(
            name=name,
            last_message=last_message,
            last_timestamp=last_timestamp,
            avatar=avatar,
            online=online,
        ):
            return Employee(
                name=name,
                last_message=last_message or "",
                last_timestamp=last_timestamp or "",
                avatar=avatar or avatar_url(name, avatar_base_url),
                online=bool(online),
            )
    raise TypeError(f"unsupported roster entry: {entry!r}")


def normalize_roster(payload: Any, avatar_base_url: str | None = None) -> list[Employee]:
    """Build the canonical roster from a ``GET /chats/all`` body.

    A body without an ``employees`` list yields an empty roster. Entries that
    name no employee are skipped and a repeated name keeps its first
    occurrence, so names stay unique.
    """
    raw_entries = payload.get("employees") if isinstance(payload, dict) else None
    if not isinstance(raw_entries, list):
        return []

    roster: list[Employee] = []
    seen: set[str] = set()
    for raw in raw_entries:
        entry = parse_roster_entry(raw)
        if entry is None:
            logger.warning("Skipping roster entry without a name: %r", raw)
            continue
        if entry.name in seen:
            logger.warning("Skipping duplicate roster entry %r", entry.name)
            continue
        seen.add(entry.name)
        roster.append(to_employee(entry, avatar_base_url))
    return roster
