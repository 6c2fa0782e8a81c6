from __future__ import annotations

from dataclasses import dataclass

from chat_dashboard.domain.value_objects.enums import MessageType, Sender


@dataclass(frozen=True, slots=True)
class Message:
    sender: Sender
    text: str
    timestamp: str
    type: MessageType = MessageType.TEXT
    document: str | None = None

    @property
    def is_pinned(self) -> bool:
        return self.sender == Sender.BOSS
