from __future__ import annotations

from typing import Any, Protocol

from chat_dashboard.domain.entities.message import Message


class ChatBackend(Protocol):
    """Request/response contract of the remote chat backend.

    Fetch methods return the decoded JSON body untouched; normalization is
    the caller's job. All methods raise ``BackendUnavailableError`` on
    transport failure or non-success status and ``MalformedPayloadError``
    when the body is not JSON.
    """

    async def fetch_roster(self) -> Any: ...

    async def fetch_conversation(self, employee: str) -> Any: ...

    async def send_message(self, employee: str, message: Message) -> None: ...
