from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from chat_dashboard.application.dto.events import ConversationLoaded
from chat_dashboard.application.exceptions import MalformedPayloadError
from chat_dashboard.application.ports.backend import ChatBackend
from chat_dashboard.application.ports.clock import Clock, default_clock
from chat_dashboard.domain.entities.message import Message
from chat_dashboard.domain.value_objects.enums import MessageType, Sender
from chat_dashboard.services.timestamps import to_iso

logger = logging.getLogger(__name__)


def normalize_message(raw: Any, now_iso: str) -> Message | None:
    """Canonical message for one backend item, or None if it cannot be one."""
    if not isinstance(raw, dict):
        logger.warning("Skipping non-object message: %r", raw)
        return None

    try:
        sender = Sender(raw.get("sender"))
    except ValueError:
        logger.warning("Skipping message with unknown sender: %r", raw.get("sender"))
        return None

    try:
        msg_type = MessageType(raw.get("type") or MessageType.TEXT)
    except ValueError:
        logger.warning("Unknown message type %r, treating as text", raw.get("type"))
        msg_type = MessageType.TEXT

    text = raw.get("text")
    timestamp = raw.get("timestamp")
    document = raw.get("document")
    return Message(
        sender=sender,
        text=text if isinstance(text, str) else "",
        timestamp=timestamp if isinstance(timestamp, str) else now_iso,
        type=msg_type,
        document=document if isinstance(document, str) else None,
    )


def normalize_messages(payload: Any, now_iso: str) -> list[Message]:
    """Normalize a ``GET /chats/{name}`` body, keeping backend order."""
    if not isinstance(payload, dict):
        raise MalformedPayloadError(f"expected a JSON object, got {type(payload).__name__}")
    raw_messages = payload.get("messages")
    if raw_messages is None:
        return []
    if not isinstance(raw_messages, list):
        raise MalformedPayloadError("'messages' is not a list")

    messages: list[Message] = []
    for raw in raw_messages:
        msg = normalize_message(raw, now_iso)
        if msg is not None:
            messages.append(msg)
    return messages


def extract_pinned(messages: Iterable[Message]) -> tuple[Message, ...]:
    return tuple(m for m in messages if m.is_pinned)


class ConversationLoader:
    """Fetches one conversation and tags the result with the requested name."""

    def __init__(self, backend: ChatBackend, clock: Clock | None = None) -> None:
        self._backend = backend
        self._clock = clock or default_clock

    async def load(self, employee: str) -> ConversationLoaded:
        payload = await self._backend.fetch_conversation(employee)
        messages = normalize_messages(payload, to_iso(self._clock.now()))
        logger.debug("Loaded %d messages for %s", len(messages), employee)
        return ConversationLoaded(employee=employee, transcript=tuple(messages))
