from __future__ import annotations

import asyncio
import logging

from chat_dashboard.application.dto.events import (
    ComposingChanged,
    ConversationSelected,
    RosterLoaded,
    SearchChanged,
)
from chat_dashboard.application.exceptions import AppError
from chat_dashboard.application.ports.backend import ChatBackend
from chat_dashboard.application.ports.clock import Clock
from chat_dashboard.domain.entities.employee import Employee
from chat_dashboard.services.conversation_service import ConversationLoader
from chat_dashboard.services.message_service import MessageService
from chat_dashboard.services.roster_service import normalize_roster
from chat_dashboard.services.search_service import filter_roster
from chat_dashboard.services.session_store import SessionState, SessionStore

logger = logging.getLogger(__name__)


class ChatSession:
    """One Agent's dashboard session over a chat backend."""

    def __init__(
        self,
        backend: ChatBackend,
        *,
        clock: Clock | None = None,
        avatar_base_url: str | None = None,
    ) -> None:
        self._backend = backend
        self._avatar_base_url = avatar_base_url
        self.store = SessionStore()
        self.loader = ConversationLoader(backend, clock)
        self.messages = MessageService(self.store, backend, clock)

    @property
    def state(self) -> SessionState:
        return self.store.state

    async def load_roster(self) -> None:
        try:
            payload = await self._backend.fetch_roster()
        except AppError as exc:
            logger.warning("Error loading employees: %s", exc.detail)
            return
        roster = normalize_roster(payload, self._avatar_base_url)
        self.store.dispatch(RosterLoaded(tuple(roster)))
        logger.info("Roster loaded with %d employees", len(roster))

    async def select(self, employee: str | None) -> None:
        """Switch the active conversation and load it.

        Selecting the already active conversation does nothing. A load that
        completes after the selection moved on is discarded by the store.
        """
        if employee == self.state.active_conversation:
            return
        self.store.dispatch(ConversationSelected(employee))
        if employee is None:
            return
        try:
            loaded = await self.loader.load(employee)
        except AppError as exc:
            logger.warning("Error loading chat with %s: %s", employee, exc.detail)
            return
        self.store.dispatch(loaded)

    def send(self, text: str | None = None) -> asyncio.Task[None] | None:
        return self.messages.send(self.state.composing_text if text is None else text)

    def set_search(self, query: str) -> None:
        self.store.dispatch(SearchChanged(query))

    def set_composing(self, text: str) -> None:
        self.store.dispatch(ComposingChanged(text))

    def filtered_roster(self) -> list[Employee]:
        return filter_roster(self.state.roster, self.state.search_query)

    async def close(self) -> None:
        await self.messages.drain()
