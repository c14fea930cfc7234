"""Entrada do webhook do gateway: assinatura, parsing e classificação."""

from __future__ import annotations

import json
import logging
from typing import Any

from api.connectors.stripe.webhook.signature import DEFAULT_TOLERANCE_SECONDS, verify_signature
from app.constants.orders import PAYMENT_COMPLETED_EVENT_TYPES
from app.domain.webhook_event import WebhookEvent
from utils.errors import InvalidEventError

logger = logging.getLogger(__name__)


def verify_webhook_event(
    raw_body: bytes,
    signature_header: str | None,
    shared_secret: str | None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    now: float | None = None,
) -> WebhookEvent:
    """Autentica e interpreta um evento recebido.

    Nada é lido do corpo antes da assinatura ser validada.

    Args:
        raw_body: Corpo bruto, exatamente como recebido
        signature_header: Valor do header `Stripe-Signature`
        shared_secret: Segredo do endpoint de webhook
        tolerance_seconds: Idade máxima do timestamp assinado (0 desativa)
        now: Epoch atual (testes)

    Raises:
        AuthenticationError: Assinatura ausente, malformada ou inválida
        InvalidEventError: Assinatura válida, mas envelope ilegível

    Returns:
        WebhookEvent, com `ignored=True` para tipos que não são pagamento concluído
    """
    verify_signature(raw_body, signature_header, shared_secret, tolerance_seconds, now)

    try:
        envelope = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidEventError("invalid_json") from exc

    if not isinstance(envelope, dict):
        raise InvalidEventError("payload_not_object")

    event_type = envelope.get("type")
    if not isinstance(event_type, str) or not event_type:
        raise InvalidEventError("missing_event_type")

    data_object = _data_object(envelope)
    session_id = data_object.get("id")
    if not isinstance(session_id, str) or not session_id:
        session_id = None

    ignored = event_type not in PAYMENT_COMPLETED_EVENT_TYPES
    if not ignored and session_id is None:
        # Evento de pagamento sem sessão: nada a notificar
        logger.warning("webhook_event_without_session", extra={"event_type": event_type})
        ignored = True

    return WebhookEvent(
        event_id=str(envelope.get("id") or ""),
        event_type=event_type,
        session_id=session_id,
        ignored=ignored,
        data_object=data_object,
    )


def _data_object(envelope: dict[str, Any]) -> dict[str, Any]:
    data = envelope.get("data")
    if not isinstance(data, dict):
        return {}
    obj = data.get("object")
    return obj if isinstance(obj, dict) else {}
