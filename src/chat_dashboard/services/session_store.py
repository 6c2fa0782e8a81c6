"""Session state and its reducers.

Every transition is a pure function ``(SessionState, event) -> SessionState``;
``SessionStore`` only routes events and swaps the current snapshot.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from chat_dashboard.application.dto.events import (
    ComposingChanged,
    ConversationLoaded,
    ConversationSelected,
    MessageSent,
    RosterLoaded,
    SearchChanged,
    SessionEvent,
)
from chat_dashboard.domain.entities.employee import Employee
from chat_dashboard.domain.entities.message import Message
from chat_dashboard.services.conversation_service import extract_pinned

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionState:
    roster: tuple[Employee, ...] = ()
    roster_loaded: bool = False
    active_conversation: str | None = None
    transcript: tuple[Message, ...] = ()
    pinned_instructions: tuple[Message, ...] = ()
    composing_text: str = ""
    search_query: str = ""

    def find_employee(self, name: str) -> Employee | None:
        for emp in self.roster:
            if emp.name == name:
                return emp
        return None


def roster_loaded(state: SessionState, event: RosterLoaded) -> SessionState:
    if state.roster_loaded:
        logger.debug("Roster already loaded, ignoring reload")
        return state
    return dataclasses.replace(state, roster=event.roster, roster_loaded=True)


def conversation_selected(state: SessionState, event: ConversationSelected) -> SessionState:
    if event.employee == state.active_conversation:
        return state
    return dataclasses.replace(
        state,
        active_conversation=event.employee,
        transcript=(),
        pinned_instructions=(),
    )


def conversation_loaded(state: SessionState, event: ConversationLoaded) -> SessionState:
    if event.employee != state.active_conversation:
        logger.info(
            "Discarding stale conversation load for %s (active: %s)",
            event.employee,
            state.active_conversation,
        )
        return state
    # Anything already in the transcript was sent since the selection; keep it
    # after the fetched history unless the backend already returned it.
    local = tuple(m for m in state.transcript if m not in event.transcript)
    transcript = (*event.transcript, *local)
    return dataclasses.replace(
        state,
        transcript=transcript,
        pinned_instructions=extract_pinned(transcript),
    )


def message_sent(state: SessionState, event: MessageSent) -> SessionState:
    if event.employee != state.active_conversation:
        return state
    transcript = (*state.transcript, event.message)
    roster = tuple(
        dataclasses.replace(
            emp,
            last_message=event.message.text,
            last_timestamp=event.display_timestamp,
        )
        if emp.name == event.employee
        else emp
        for emp in state.roster
    )
    return dataclasses.replace(
        state,
        roster=roster,
        transcript=transcript,
        pinned_instructions=extract_pinned(transcript),
        composing_text="",
    )


def search_changed(state: SessionState, event: SearchChanged) -> SessionState:
    return dataclasses.replace(state, search_query=event.query)


def composing_changed(state: SessionState, event: ComposingChanged) -> SessionState:
    return dataclasses.replace(state, composing_text=event.text)


def reduce(state: SessionState, event: SessionEvent) -> SessionState:
    match event:
        case RosterLoaded():
            return roster_loaded(state, event)
        case ConversationSelected():
            return conversation_selected(state, event)
        case ConversationLoaded():
            return conversation_loaded(state, event)
        case MessageSent():
            return message_sent(state, event)
        case SearchChanged():
            return search_changed(state, event)
        case ComposingChanged():
            return composing_changed(state, event)
    raise TypeError(f"unknown session event: {event!r}")


class SessionStore:
    """Holds the current snapshot; the only place state is replaced."""

    def __init__(self, initial: SessionState | None = None) -> None:
        self._state = initial or SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event: SessionEvent) -> SessionState:
        self._state = reduce(self._state, event)
        return self._state
