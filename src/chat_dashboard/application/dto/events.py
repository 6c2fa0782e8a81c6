"""Session events, one per state transition."""
from __future__ import annotations

from dataclasses import dataclass

from chat_dashboard.domain.entities.employee import Employee
from chat_dashboard.domain.entities.message import Message


@dataclass(frozen=True, slots=True)
class RosterLoaded:
    roster: tuple[Employee, ...]


@dataclass(frozen=True, slots=True)
class ConversationSelected:
    employee: str | None


@dataclass(frozen=True, slots=True)
class ConversationLoaded:
    employee: str
    transcript: tuple[Message, ...]


@dataclass(frozen=True, slots=True)
class MessageSent:
    employee: str
    message: Message
    display_timestamp: str


@dataclass(frozen=True, slots=True)
class SearchChanged:
    query: str


@dataclass(frozen=True, slots=True)
class ComposingChanged:
    text: str


SessionEvent = (
    RosterLoaded
    | ConversationSelected
    | ConversationLoaded
    | MessageSent
    | SearchChanged
    | ComposingChanged
)
