from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Employee:
    name: str
    last_message: str
    last_timestamp: str
    avatar: str
    online: bool = False
