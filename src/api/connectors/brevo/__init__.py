"""Conector Brevo (email transacional)."""

from api.connectors.brevo.client import (
    BrevoEmailClient,
    EmailMessage,
    create_brevo_client,
)

__all__ = [
    "BrevoEmailClient",
    "EmailMessage",
    "create_brevo_client",
]
