"""Shared test fixtures."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest

from chat_dashboard.api.middleware.correlation_id import correlation_id_ctx
from chat_dashboard.application.exceptions import BackendUnavailableError
from chat_dashboard.domain.entities.employee import Employee
from chat_dashboard.domain.entities.message import Message
from chat_dashboard.domain.value_objects.enums import MessageType, Sender

FIXED_NOW = datetime(2024, 5, 1, 9, 15, 30, 250000, tzinfo=timezone.utc)
FIXED_NOW_ISO = "2024-05-01T09:15:30.250Z"


@dataclass
class FixedClock:
    moment: datetime = FIXED_NOW

    def now(self) -> datetime:
        return self.moment


def make_employee(
    name: str = "Dana",
    *,
    last_message: str = "",
    last_timestamp: str = "",
    online: bool = False,
) -> Employee:
    return Employee(
        name=name,
        last_message=last_message,
        last_timestamp=last_timestamp,
        avatar=f"https://ui-avatars.com/api/?name={name}",
        online=online,
    )


def make_message(
    *,
    sender: Sender = Sender.EMPLOYEE,
    text: str = "hello",
    timestamp: str = "2024-05-01T08:00:00.000Z",
    type: MessageType = MessageType.TEXT,
    document: str | None = None,
) -> Message:
    return Message(sender=sender, text=text, timestamp=timestamp, type=type, document=document)


@dataclass
class FakeBackend:
    """In-memory chat backend.

    ``gates`` holds an event per employee; a conversation fetch for that
    employee blocks until the event is set.
    """
    roster_payload: Any = field(default_factory=lambda: {"employees": []})
    conversations: dict[str, Any] = field(default_factory=dict)
    gates: dict[str, asyncio.Event] = field(default_factory=dict)
    fail_fetch: bool = False
    fail_send: bool = False
    roster_calls: int = 0
    fetch_calls: list[str] = field(default_factory=list)
    request_ids: list[str] = field(default_factory=list)
    sent: list[tuple[str, Message]] = field(default_factory=list)

    async def fetch_roster(self) -> Any:
        self.roster_calls += 1
        if self.fail_fetch:
            raise BackendUnavailableError("GET", "/chats/all", "returned 500", status_code=500)
        return self.roster_payload

    async def fetch_conversation(self, employee: str) -> Any:
        self.fetch_calls.append(employee)
        self.request_ids.append(correlation_id_ctx.get())
        gate = self.gates.get(employee)
        if gate is not None:
            await gate.wait()
        if self.fail_fetch:
            raise BackendUnavailableError("GET", f"/chats/{employee}", "returned 500", status_code=500)
        return self.conversations.get(employee, {"messages": []})

    async def send_message(self, employee: str, message: Message) -> None:
        await asyncio.sleep(0)
        if self.fail_send:
            raise BackendUnavailableError("POST", "/chats/send", "returned 503", status_code=503)
        self.sent.append((employee, message))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend(
        roster_payload={
            "employees": [
                "Dana",
                {"name": "Alex", "lastMessage": "see you", "online": True},
                "dave",
            ]
        },
        conversations={
            "Dana": {
                "messages": [
                    {"sender": "Employee", "text": "hi", "timestamp": "2024-05-01T08:00:00Z"},
                    {"sender": "Boss", "text": "Be polite", "timestamp": "2024-05-01T08:01:00Z"},
                    {"sender": "Agent", "text": "hello Dana", "timestamp": "2024-05-01T08:02:00Z"},
                ]
            },
            "Alex": {
                "messages": [
                    {"sender": "Employee", "text": "report attached", "type": "document",
                     "document": "q1.pdf"},
                ]
            },
        },
    )
