"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.constants.orders import ChannelName
from config.settings import get_notifier_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class ChannelCheck:
    """Situação de configuração de um canal ou dependência."""

    status: Literal["configured", "not_configured"]
    detail: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "detail": self.detail}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_notifier_settings().base.service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: pronto quando ao menos um canal pode notificar."""
    settings = get_notifier_settings()
    configured = set(settings.configured_channels)

    checks = {
        channel.value: (
            ChannelCheck(status="configured")
            if channel.value in configured
            else ChannelCheck(status="not_configured", detail="missing_credentials")
        )
        for channel in ChannelName
    }
    checks["payment_webhook"] = (
        ChannelCheck(status="configured")
        if settings.stripe.webhook_secret
        else ChannelCheck(status="not_configured", detail="missing_webhook_secret")
    )

    ready = bool(configured)
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.as_dict() for name, check in checks.items()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
