"""Casos de uso dos dois caminhos de entrada de pedidos."""

from app.use_cases.orders.process_payment_webhook import (
    ProcessPaymentWebhookUseCase,
    WebhookDecision,
    WebhookProcessingResult,
)
from app.use_cases.orders.submit_direct_order import DirectOrderResult, SubmitDirectOrderUseCase

__all__ = [
    "DirectOrderResult",
    "ProcessPaymentWebhookUseCase",
    "SubmitDirectOrderUseCase",
    "WebhookDecision",
    "WebhookProcessingResult",
]
