from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_dashboard.api.middleware.correlation_id import CorrelationIdMiddleware
from chat_dashboard.api.v1.routers import dashboard, health
from chat_dashboard.application.ports.backend import ChatBackend
from chat_dashboard.config import settings
from chat_dashboard.infrastructure.http.backend_client import (
    HttpChatBackend,
    create_http_client,
)
from chat_dashboard.services.session_service import ChatSession

logger = logging.getLogger(__name__)


def _make_lifespan(
    backend: ChatBackend | None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Startup / shutdown lifecycle."""
        http_backend: HttpChatBackend | None = None
        if backend is None:
            http_backend = HttpChatBackend(create_http_client())
            logger.info("Using chat backend at %s", settings.CHAT_BACKEND_URL)
        app.state.backend = backend if backend is not None else http_backend

        session = ChatSession(app.state.backend, avatar_base_url=settings.AVATAR_BASE_URL)
        app.state.session = session
        await session.load_roster()

        yield

        await session.close()
        if http_backend is not None:
            await http_backend.aclose()
            logger.info("Backend HTTP client closed")

    return lifespan


def create_app(backend: ChatBackend | None = None) -> FastAPI:
    app = FastAPI(
        title="Chat Dashboard",
        version="0.1.0",
        lifespan=_make_lifespan(backend),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(health.router)
    app.include_router(dashboard.router)

    return app
