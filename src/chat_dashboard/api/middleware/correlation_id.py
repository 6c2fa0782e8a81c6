"""Request correlation ids.

The id of the request being served lives in a context variable so backend
calls made on its behalf carry the same ``X-Request-ID``. Delivery tasks
spawned while serving the request copy the context and carry it too.
"""
from __future__ import annotations

import uuid
from contextvars import ContextVar

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")

HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Plain ASGI middleware, so the context var is set in the endpoint's own context."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(HEADER) or uuid.uuid4().hex

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[HEADER] = request_id
            await send(message)

        token = correlation_id_ctx.set(request_id)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            correlation_id_ctx.reset(token)
