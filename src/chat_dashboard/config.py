from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CHAT_BACKEND_URL: str = "http://localhost:9000"
    BACKEND_TIMEOUT_SECONDS: float | None = None

    AVATAR_BASE_URL: str = "https://ui-avatars.com/api/"

    CORS_ORIGINS: list[str] = ["*"]

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: Literal["debug", "info", "warning", "error"] = "info"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
