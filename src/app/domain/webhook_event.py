"""Evento de webhook do gateway, já autenticado."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class WebhookEvent:
    """Envelope mínimo de um evento verificado.

    Attributes:
        event_id: ID atribuído pelo gateway (evt_...)
        event_type: Tipo do evento (ex: checkout.session.completed)
        session_id: ID da sessão de checkout, quando o objeto é uma sessão
        ignored: True para tipos que não disparam notificação
        data_object: `data.object` do envelope (sessão como enviada no evento)
    """

    event_id: str
    event_type: str
    session_id: str | None = None
    ignored: bool = False
    data_object: dict[str, Any] = field(default_factory=dict)
