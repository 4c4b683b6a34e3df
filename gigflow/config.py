# gigflow/config.py
from __future__ import annotations

import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, Field


class Settings(BaseModel):
    backend: Literal["memory", "supabase"] = "memory"
    api_url: str = "http://127.0.0.1:8000"
    http_timeout: float = Field(default=10.0, gt=0)
    supabase_url: Optional[str] = None
    supabase_service_role: Optional[str] = None
    log_level: str = "INFO"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.environ
        settings = cls(
            backend=env.get("GIGFLOW_BACKEND", "memory"),
            api_url=env.get("GIGFLOW_API_URL", "http://127.0.0.1:8000"),
            http_timeout=float(env.get("GIGFLOW_HTTP_TIMEOUT", "10")),
            supabase_url=env.get("SUPABASE_URL"),
            supabase_service_role=env.get("SUPABASE_SERVICE_ROLE"),
            log_level=env.get("LOG_LEVEL", "INFO"),
            port=int(env.get("PORT", "8000")),
        )
        if settings.backend == "supabase" and not (
            settings.supabase_url and settings.supabase_service_role
        ):
            raise RuntimeError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE")
        return settings


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
