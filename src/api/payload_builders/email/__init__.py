"""Emails HTML do pedido (cliente e restaurante)."""

from api.payload_builders.email._common import EmailContent
from api.payload_builders.email.customer_confirmation import (
    build_customer_email,
    customer_subject,
)
from api.payload_builders.email.operator_ticket import build_operator_email, operator_subject

__all__ = [
    "EmailContent",
    "build_customer_email",
    "build_operator_email",
    "customer_subject",
    "operator_subject",
]
