from __future__ import annotations

from enum import StrEnum


class Sender(StrEnum):
    EMPLOYEE = "Employee"
    AGENT = "Agent"
    BOSS = "Boss"


class MessageType(StrEnum):
    TEXT = "text"
    DOCUMENT = "document"
