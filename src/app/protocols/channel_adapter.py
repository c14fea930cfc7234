"""Contrato dos adapters de canal de notificação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.notification import ChannelOutcome
    from app.domain.order import Order


class ChannelAdapterProtocol(Protocol):
    """Um canal = uma chamada externa por pedido.

    `send` devolve skipped/delivered/failed. Pode levantar exceção; o
    dispatcher converte em `failed` sem afetar os outros canais.
    """

    name: str

    async def send(self, order: Order) -> ChannelOutcome: ...
