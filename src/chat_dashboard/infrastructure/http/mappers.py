from __future__ import annotations

from typing import Any

from chat_dashboard.domain.entities.message import Message


def message_to_wire(message: Message) -> dict[str, Any]:
    data: dict[str, Any] = {
        "sender": message.sender.value,
        "text": message.text,
        "timestamp": message.timestamp,
        "type": message.type.value,
    }
    if message.document is not None:
        data["document"] = message.document
    return data


def send_request_body(employee: str, message: Message) -> dict[str, Any]:
    return {"employee": employee, "message": message_to_wire(message)}
