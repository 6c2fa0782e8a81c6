"""httpx implementation of the chat backend port."""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from chat_dashboard.api.middleware.correlation_id import HEADER, correlation_id_ctx
from chat_dashboard.application.exceptions import (
    BackendUnavailableError,
    MalformedPayloadError,
)
from chat_dashboard.config import settings
from chat_dashboard.domain.entities.message import Message
from chat_dashboard.infrastructure.http.mappers import send_request_body

logger = logging.getLogger(__name__)

ROSTER_PATH = "/chats/all"
SEND_PATH = "/chats/send"


def conversation_path(employee: str) -> str:
    return f"/chats/{quote(employee, safe='')}"


async def _forward_correlation_id(request: httpx.Request) -> None:
    cid = correlation_id_ctx.get()
    if cid and HEADER not in request.headers:
        request.headers[HEADER] = cid


def create_http_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url or settings.CHAT_BACKEND_URL,
        timeout=timeout if timeout is not None else settings.BACKEND_TIMEOUT_SECONDS,
        transport=transport,
        event_hooks={"request": [_forward_correlation_id]},
    )


class HttpChatBackend:
    """Talks to the backend over a shared ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_roster(self) -> Any:
        return await self._get_json(ROSTER_PATH)

    async def fetch_conversation(self, employee: str) -> Any:
        return await self._get_json(conversation_path(employee))

    async def send_message(self, employee: str, message: Message) -> None:
        resp = await self._request("POST", SEND_PATH, json=send_request_body(employee, message))
        logger.debug("POST %s -> %s", SEND_PATH, resp.status_code)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str) -> Any:
        resp = await self._request("GET", path)
        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedPayloadError(f"GET {path}: response is not JSON") from exc

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(method, path, repr(exc)) from exc
        if not resp.is_success:
            raise BackendUnavailableError(
                method, path, f"returned {resp.status_code}",
                status_code=resp.status_code,
            )
        return resp
