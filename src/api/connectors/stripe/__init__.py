"""Conector do gateway de pagamento (Stripe)."""

from api.connectors.stripe.gateway import StripeCheckoutGateway
from api.connectors.stripe.webhook import verify_webhook_event

__all__ = [
    "StripeCheckoutGateway",
    "verify_webhook_event",
]
