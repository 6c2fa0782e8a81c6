from __future__ import annotations

import asyncio
import logging

from chat_dashboard.application.dto.events import MessageSent
from chat_dashboard.application.exceptions import AppError
from chat_dashboard.application.ports.backend import ChatBackend
from chat_dashboard.application.ports.clock import Clock, default_clock
from chat_dashboard.domain.entities.message import Message
from chat_dashboard.domain.value_objects.enums import MessageType, Sender
from chat_dashboard.services.session_store import SessionStore
from chat_dashboard.services.timestamps import format_timestamp, to_iso

logger = logging.getLogger(__name__)


class MessageService:
    """Optimistic send followed by a single fire-and-forget delivery.

    The local echo is applied to the store before the delivery task exists.
    Delivery outcomes only reach the log: a failed delivery is never rolled
    back, retried or flagged.
    """

    def __init__(
        self,
        store: SessionStore,
        backend: ChatBackend,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._backend = backend
        self._clock = clock or default_clock
        self._pending: set[asyncio.Task[None]] = set()

    def send(self, text: str) -> asyncio.Task[None] | None:
        """Echo *text* locally and schedule its delivery.

        Returns the delivery task, or None when the send was ignored (blank
        text or no conversation selected). Must be called from a running
        event loop.
        """
        employee = self._store.state.active_conversation
        if not text.strip() or employee is None:
            return None

        iso_timestamp = to_iso(self._clock.now())
        message = Message(
            sender=Sender.AGENT,
            text=text,
            timestamp=iso_timestamp,
            type=MessageType.TEXT,
        )
        self._store.dispatch(
            MessageSent(
                employee=employee,
                message=message,
                display_timestamp=format_timestamp(iso_timestamp),
            )
        )

        task = asyncio.create_task(
            self._deliver(employee, message), name=f"deliver-{employee}",
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _deliver(self, employee: str, message: Message) -> None:
        try:
            await self._backend.send_message(employee, message)
        except AppError as exc:
            logger.warning("Failed to deliver message to %s: %s", employee, exc.detail)
        except Exception:
            logger.exception("Unexpected error delivering message to %s", employee)
        else:
            logger.debug("Delivered message to %s", employee)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for in-flight deliveries to settle."""
        if self._pending:
            await asyncio.gather(*self._pending)
