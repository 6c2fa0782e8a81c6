"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from chat_dashboard.application.ports.backend import ChatBackend
from chat_dashboard.services.session_service import ChatSession


def get_session(request: Request) -> ChatSession:
    return request.app.state.session


def get_backend(request: Request) -> ChatBackend:
    return request.app.state.backend


SessionDep = Annotated[ChatSession, Depends(get_session)]
BackendDep = Annotated[ChatBackend, Depends(get_backend)]
