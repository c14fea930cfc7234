"""Adapters de canal falsos para testar o fan-out sem IO."""

from __future__ import annotations

import asyncio

from app.domain.notification import ChannelOutcome
from app.domain.order import Order


class RecordingAdapter:
    """Devolve um outcome fixo e registra os pedidos recebidos."""

    def __init__(self, name: str, outcome: ChannelOutcome | None = None) -> None:
        self.name = name
        self._outcome = outcome or ChannelOutcome.delivered()
        self.sent: list[Order] = []

    async def send(self, order: Order) -> ChannelOutcome:
        self.sent.append(order)
        return self._outcome


class RaisingAdapter(RecordingAdapter):
    """Simula um adapter com bug: levanta em vez de devolver outcome."""

    def __init__(self, name: str, error: Exception | None = None) -> None:
        super().__init__(name)
        self._error = error or RuntimeError("boom")

    async def send(self, order: Order) -> ChannelOutcome:
        self.sent.append(order)
        raise self._error


class SlowAdapter(RecordingAdapter):
    """Nunca responde dentro do timeout do dispatcher."""

    def __init__(self, name: str, delay_seconds: float = 5.0) -> None:
        super().__init__(name)
        self._delay = delay_seconds

    async def send(self, order: Order) -> ChannelOutcome:
        self.sent.append(order)
        await asyncio.sleep(self._delay)
        return ChannelOutcome.delivered()
