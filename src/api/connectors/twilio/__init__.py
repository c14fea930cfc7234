"""Conector Twilio (WhatsApp)."""

from api.connectors.twilio.client import (
    TwilioSendResult,
    TwilioWhatsAppClient,
    create_twilio_client,
)
from api.connectors.twilio.errors import (
    ALREADY_DELIVERED_ERROR_CODE,
    TwilioApiError,
    parse_twilio_error,
)

__all__ = [
    "ALREADY_DELIVERED_ERROR_CODE",
    "TwilioApiError",
    "TwilioSendResult",
    "TwilioWhatsAppClient",
    "create_twilio_client",
    "parse_twilio_error",
]
