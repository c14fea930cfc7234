"""Endpoint do webhook do gateway de pagamento.

Endpoint:
- POST /api/webhook-stripe: eventos assinados (`Stripe-Signature`)

Segurança:
- Corpo bruto lido antes de qualquer parsing (a assinatura cobre os bytes)
- Assinatura inválida => 400 e nada mais é feito
- Qualquer outro desfecho => 200 `{received: true}` para evitar retries
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.stripe.webhook import verify_webhook_event
from app.observability import (
    get_correlation_id,
    record_webhook_event,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_notifier_settings
from utils.errors import AuthenticationError

if TYPE_CHECKING:
    from app.use_cases.orders import ProcessPaymentWebhookUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_webhook_use_case() -> ProcessPaymentWebhookUseCase:
    """Obtém o use case do webhook (lazy-loading)."""
    from app.bootstrap import get_process_payment_webhook_use_case

    return get_process_payment_webhook_use_case()


@router.post("/webhook-stripe", response_model=None)
async def receive_payment_webhook(request: Request) -> JSONResponse | dict[str, Any]:
    """Recebe eventos do gateway e dispara as notificações do pedido pago."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        stripe_settings = get_notifier_settings().stripe
        raw_body = await request.body()

        try:
            event = verify_webhook_event(
                raw_body,
                request.headers.get("stripe-signature"),
                stripe_settings.webhook_secret,
                tolerance_seconds=stripe_settings.webhook_tolerance_seconds,
            )
        except AuthenticationError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={
                    "channel": "stripe",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            record_webhook_event("unknown", "rejected")
            return JSONResponse(
                content={"error": f"Webhook Error: {exc}"},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "stripe",
                "event_id": event.event_id,
                "event_type": event.event_type,
                "ignored": event.ignored,
                "payload_size": len(raw_body),
            },
        )

        try:
            result = await _get_webhook_use_case().execute(event)
            logger.info(
                "webhook_processed",
                extra={
                    "event_id": event.event_id,
                    "decision": result.decision.value,
                    "order_id": result.order_id,
                },
            )
        except Exception:
            logger.exception(
                "webhook_processing_failed",
                extra={"event_id": event.event_id, "correlation_id": get_correlation_id()},
            )

        return {"received": True}
    finally:
        reset_correlation_id(token)
