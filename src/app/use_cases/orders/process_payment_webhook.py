"""Use case: pagamento concluído notificado pelo webhook do gateway.

O evento já chega autenticado. Daqui em diante nada muda o status HTTP:
falhas de consulta, pedido inválido ou canais com erro são apenas
registrados e o webhook é confirmado.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from app.domain.order_sources import PaymentSessionSource
from app.observability import record_webhook_event
from config.logging import log_fallback
from utils.errors import PaymentGatewayError, ValidationError

if TYPE_CHECKING:
    from app.domain.notification import DispatchReport
    from app.domain.webhook_event import WebhookEvent
    from app.protocols import PaymentGatewayProtocol
    from app.services import NotificationDispatcher, OrderNormalizer

logger = logging.getLogger(__name__)


class WebhookDecision(StrEnum):
    """Destino dado a um evento autenticado."""

    IGNORED = "ignored"
    DISPATCHED = "dispatched"
    INVALID_ORDER = "invalid_order"


@dataclass(frozen=True)
class WebhookProcessingResult:
    decision: WebhookDecision
    order_id: str | None = None
    report: DispatchReport | None = None
    reason: str | None = None


class ProcessPaymentWebhookUseCase:
    """Busca a sessão paga, normaliza e dispara as notificações."""

    def __init__(
        self,
        normalizer: OrderNormalizer,
        dispatcher: NotificationDispatcher,
        gateway: PaymentGatewayProtocol,
    ) -> None:
        self._normalizer = normalizer
        self._dispatcher = dispatcher
        self._gateway = gateway

    async def execute(self, event: WebhookEvent) -> WebhookProcessingResult:
        """Processa o evento; nunca levanta por falha de negócio ou de canal."""
        if event.ignored or not event.session_id:
            record_webhook_event(event.event_type, WebhookDecision.IGNORED.value)
            return WebhookProcessingResult(WebhookDecision.IGNORED, reason="event_type_not_handled")

        session = await self._load_session(event)
        line_items = await self._load_line_items(event.session_id, session)

        try:
            source = PaymentSessionSource(session=session, line_items=line_items)
            order = self._normalizer.normalize(source)
        except ValidationError as exc:
            logger.warning(
                "webhook_order_invalid",
                extra={
                    "event_id": event.event_id,
                    "session_id": event.session_id,
                    "error": str(exc),
                    "field": exc.field,
                },
            )
            record_webhook_event(event.event_type, WebhookDecision.INVALID_ORDER.value)
            return WebhookProcessingResult(WebhookDecision.INVALID_ORDER, reason=str(exc))
        except ValueError as exc:
            # Sessão sem os campos mínimos (pydantic)
            logger.warning(
                "webhook_session_unreadable",
                extra={"event_id": event.event_id, "session_id": event.session_id, "error": str(exc)},
            )
            record_webhook_event(event.event_type, WebhookDecision.INVALID_ORDER.value)
            return WebhookProcessingResult(WebhookDecision.INVALID_ORDER, reason="session_unreadable")

        logger.info(
            "payment_order_accepted",
            extra={
                "event_id": event.event_id,
                "order_id": order.order_id,
                "order_type": order.order_type.value,
                "total_minor_units": order.total_amount_minor_units,
            },
        )
        report = await self._dispatcher.dispatch(order)
        record_webhook_event(event.event_type, WebhookDecision.DISPATCHED.value)
        return WebhookProcessingResult(
            WebhookDecision.DISPATCHED,
            order_id=order.order_id,
            report=report,
        )

    async def _load_session(self, event: WebhookEvent) -> dict[str, Any]:
        """Sessão completa do gateway; o objeto do evento é o fallback."""
        try:
            return await self._gateway.retrieve_session(event.session_id or "")
        except PaymentGatewayError as exc:
            log_fallback(
                logger,
                "checkout_session",
                reason="retrieve_failed",
                session_id=event.session_id,
                error=str(exc),
            )
            return dict(event.data_object)

    async def _load_line_items(
        self,
        session_id: str,
        session: dict[str, Any],
    ) -> list[dict[str, Any]]:
        expanded = session.get("line_items")
        if isinstance(expanded, dict) and isinstance(expanded.get("data"), list):
            return expanded["data"]
        try:
            return await self._gateway.list_line_items(session_id)
        except PaymentGatewayError as exc:
            log_fallback(
                logger,
                "line_items",
                reason="list_failed",
                session_id=session_id,
                error=str(exc),
            )
            return []
