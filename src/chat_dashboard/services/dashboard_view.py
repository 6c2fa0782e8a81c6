"""Read-side projection of the session into what the dashboard renders."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from chat_dashboard.domain.entities.employee import Employee
from chat_dashboard.domain.entities.message import Message
from chat_dashboard.domain.value_objects.enums import Sender
from chat_dashboard.services.roster_service import avatar_url
from chat_dashboard.services.search_service import filter_roster
from chat_dashboard.services.session_store import SessionState
from chat_dashboard.services.timestamps import format_timestamp


@dataclass(frozen=True, slots=True)
class EmployeeView:
    name: str
    last_message: str
    last_timestamp: str
    avatar: str
    online: bool
    is_active: bool


@dataclass(frozen=True, slots=True)
class MessageView:
    sender: str
    text: str
    timestamp: str
    display_time: str
    type: str
    document: str | None
    outgoing: bool


@dataclass(frozen=True, slots=True)
class ConversationHeader:
    name: str
    avatar: str
    online: bool
    presence: str


@dataclass(frozen=True, slots=True)
class DashboardView:
    roster: list[EmployeeView]
    search_query: str
    composing_text: str
    can_send: bool
    conversation: ConversationHeader | None
    pinned_instructions: list[MessageView]
    transcript: list[MessageView]


def visible_transcript(transcript: tuple[Message, ...]) -> list[Message]:
    """Transcript without Boss messages, which are shown pinned instead."""
    return [m for m in transcript if not m.is_pinned]


def _message_view(msg: Message, tz: tzinfo | None) -> MessageView:
    return MessageView(
        sender=msg.sender.value,
        text=msg.text,
        timestamp=msg.timestamp,
        display_time=format_timestamp(msg.timestamp, tz),
        type=msg.type.value,
        document=msg.document,
        outgoing=msg.sender == Sender.AGENT,
    )


def _employee_view(emp: Employee, active: str | None, tz: tzinfo | None) -> EmployeeView:
    return EmployeeView(
        name=emp.name,
        last_message=emp.last_message,
        last_timestamp=format_timestamp(emp.last_timestamp, tz),
        avatar=emp.avatar,
        online=emp.online,
        is_active=emp.name == active,
    )


def conversation_header(state: SessionState) -> ConversationHeader | None:
    name = state.active_conversation
    if name is None:
        return None
    emp = state.find_employee(name)
    online = emp.online if emp else False
    return ConversationHeader(
        name=name,
        avatar=emp.avatar if emp and emp.avatar else avatar_url(name),
        online=online,
        presence="Online" if online else "Last seen recently",
    )


def build_dashboard(state: SessionState, tz: tzinfo | None = None) -> DashboardView:
    active = state.active_conversation
    return DashboardView(
        roster=[
            _employee_view(emp, active, tz)
            for emp in filter_roster(state.roster, state.search_query)
        ],
        search_query=state.search_query,
        composing_text=state.composing_text,
        can_send=active is not None and bool(state.composing_text.strip()),
        conversation=conversation_header(state),
        pinned_instructions=[_message_view(m, tz) for m in state.pinned_instructions],
        transcript=[_message_view(m, tz) for m in visible_transcript(state.transcript)],
    )
