"""Webhook do gateway de pagamento: assinatura e parsing seguro."""

from api.connectors.stripe.webhook.receive import verify_webhook_event
from api.connectors.stripe.webhook.signature import (
    DEFAULT_TOLERANCE_SECONDS,
    SignatureHeader,
    compute_signature,
    parse_signature_header,
    verify_signature,
)

__all__ = [
    "DEFAULT_TOLERANCE_SECONDS",
    "SignatureHeader",
    "compute_signature",
    "parse_signature_header",
    "verify_signature",
    "verify_webhook_event",
]
