"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    DeliveryError,
    InvalidEventError,
    OrderNotifierError,
    PaymentGatewayError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "DeliveryError",
    "InvalidEventError",
    "OrderNotifierError",
    "PaymentGatewayError",
    "ValidationError",
]
