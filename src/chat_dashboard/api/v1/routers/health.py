from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from chat_dashboard.api.deps import BackendDep
from chat_dashboard.application.exceptions import AppError

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(backend: BackendDep) -> JSONResponse:
    try:
        await backend.fetch_roster()
    except AppError as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "errors": [f"backend: {exc.detail}"]},
        )
    return JSONResponse(content={"status": "ready"})
