from __future__ import annotations

from fastapi import APIRouter

from chat_dashboard.api.deps import SessionDep
from chat_dashboard.api.v1.schemas.dashboard import (
    ComposeRequest,
    DashboardResponse,
    SearchRequest,
    SelectConversationRequest,
    SendMessageRequest,
)
from chat_dashboard.services.dashboard_view import build_dashboard
from chat_dashboard.services.session_service import ChatSession

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


def _render(session: ChatSession) -> DashboardResponse:
    return DashboardResponse.model_validate(build_dashboard(session.state), from_attributes=True)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(session: SessionDep) -> DashboardResponse:
    return _render(session)


@router.put("/selection", response_model=DashboardResponse)
async def select_conversation(
    body: SelectConversationRequest,
    session: SessionDep,
) -> DashboardResponse:
    await session.select(body.employee)
    return _render(session)


@router.post("/messages", response_model=DashboardResponse)
async def send_message(body: SendMessageRequest, session: SessionDep) -> DashboardResponse:
    session.send(body.text)
    return _render(session)


@router.put("/search", response_model=DashboardResponse)
async def set_search(body: SearchRequest, session: SessionDep) -> DashboardResponse:
    session.set_search(body.query)
    return _render(session)


@router.put("/composer", response_model=DashboardResponse)
async def set_composer(body: ComposeRequest, session: SessionDep) -> DashboardResponse:
    session.set_composing(body.text)
    return _render(session)
