from __future__ import annotations

from pydantic import BaseModel, Field


class EmployeeResponse(BaseModel):
    name: str
    last_message: str
    last_timestamp: str
    avatar: str
    online: bool
    is_active: bool

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    sender: str
    text: str
    timestamp: str
    display_time: str
    type: str
    document: str | None
    outgoing: bool

    model_config = {"from_attributes": True}


class ConversationHeaderResponse(BaseModel):
    name: str
    avatar: str
    online: bool
    presence: str

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    roster: list[EmployeeResponse]
    search_query: str
    composing_text: str
    can_send: bool
    conversation: ConversationHeaderResponse | None
    pinned_instructions: list[MessageResponse]
    transcript: list[MessageResponse]

    model_config = {"from_attributes": True}


class SelectConversationRequest(BaseModel):
    employee: str | None = Field(None, min_length=1)


class SendMessageRequest(BaseModel):
    text: str | None = None


class SearchRequest(BaseModel):
    query: str = ""


class ComposeRequest(BaseModel):
    text: str = ""
