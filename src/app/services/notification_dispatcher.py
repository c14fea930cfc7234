"""Fan-out de um Order para todos os canais de notificação.

Cada adapter roda em sua própria tarefa, com timeout e captura de exceção
individuais. Nenhum canal bloqueia outro e `dispatch` nunca levanta.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from app.domain.notification import ChannelOutcome, DispatchReport
from app.observability import order_context, record_channel_outcome, record_latency

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.order import Order
    from app.protocols import ChannelAdapterProtocol

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_TIMEOUT_SECONDS = 15.0


class NotificationDispatcher:
    """Envia o mesmo pedido por todos os adapters configurados.

    Args:
        adapters: Canais independentes (WhatsApp, email cliente, email restaurante).
        channel_timeout_seconds: Tempo máximo de cada canal.
    """

    def __init__(
        self,
        adapters: Sequence[ChannelAdapterProtocol],
        channel_timeout_seconds: float = DEFAULT_CHANNEL_TIMEOUT_SECONDS,
    ) -> None:
        names = [adapter.name for adapter in adapters]
        if len(set(names)) != len(names):
            raise ValueError(f"nomes de canal duplicados: {names}")
        if channel_timeout_seconds <= 0:
            raise ValueError("channel_timeout_seconds deve ser > 0")
        self._adapters = tuple(adapters)
        self._timeout = channel_timeout_seconds

    @property
    def channel_names(self) -> tuple[str, ...]:
        return tuple(adapter.name for adapter in self._adapters)

    async def dispatch(self, order: Order) -> DispatchReport:
        """Tenta todos os canais e devolve o outcome de cada um."""
        with order_context(order.order_id):
            started_at = time.perf_counter()
            outcomes = await asyncio.gather(
                *(self._run_adapter(adapter, order) for adapter in self._adapters)
            )
            report = DispatchReport(
                order_id=order.order_id,
                outcomes=dict(zip(self.channel_names, outcomes, strict=True)),
            )
            record_latency("dispatcher", "dispatch", (time.perf_counter() - started_at) * 1000)
            logger.info(
                "order_dispatched",
                extra={
                    "order_type": order.order_type.value,
                    "payment_method": order.payment_method.value,
                    "channels": report.as_dict(),
                    "any_delivered": report.any_delivered,
                },
            )
        return report

    async def _run_adapter(self, adapter: ChannelAdapterProtocol, order: Order) -> ChannelOutcome:
        started_at = time.perf_counter()
        try:
            outcome = await asyncio.wait_for(adapter.send(order), timeout=self._timeout)
        except TimeoutError:
            outcome = ChannelOutcome.failed(f"timeout after {self._timeout:g}s")
        except Exception as exc:
            logger.exception(
                "channel_send_crashed",
                extra={"channel": adapter.name, "error_type": type(exc).__name__},
            )
            outcome = ChannelOutcome.failed(f"{type(exc).__name__}: {exc}")

        record_latency(adapter.name, "send", (time.perf_counter() - started_at) * 1000)
        record_channel_outcome(adapter.name, outcome.status.value, outcome.detail)
        if outcome.is_failed:
            logger.warning(
                "channel_delivery_failed",
                extra={"channel": adapter.name, "cause": outcome.detail},
            )
        return outcome
