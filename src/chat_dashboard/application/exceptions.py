"""Errors raised by backend adapters and handled by the session services.

None of them reach the dashboard user: the session logs ``detail`` and
keeps its last good state.
"""
from __future__ import annotations


class AppError(Exception):
    @property
    def detail(self) -> str:
        return str(self)


class BackendUnavailableError(AppError):
    """A backend call failed in transport or answered with a non-success status."""

    def __init__(self, method: str, path: str, reason: str, status_code: int | None = None) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        super().__init__(f"{method} {path}: {reason}")


class MalformedPayloadError(AppError):
    """Backend body is not JSON or has the wrong top-level shape."""
