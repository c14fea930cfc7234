"""Enums de domínio para pedidos e canais de notificação."""

from __future__ import annotations

from enum import StrEnum


class OrderType(StrEnum):
    """Modo de entrega do pedido."""

    PICKUP = "pickup"
    DELIVERY = "delivery"


class PaymentMethod(StrEnum):
    """Forma de pagamento registrada no pedido."""

    CARD = "card"
    CASH = "cash"
    ON_SITE = "on_site"


class ChannelName(StrEnum):
    """Canais independentes do fan-out."""

    WHATSAPP = "whatsapp"
    CUSTOMER_EMAIL = "customer_email"
    OPERATOR_EMAIL = "operator_email"


class OutcomeStatus(StrEnum):
    """Resultado de um canal para um pedido."""

    DELIVERED = "delivered"
    SKIPPED = "skipped"
    FAILED = "failed"


# Eventos do gateway que representam pagamento concluído
PAYMENT_COMPLETED_EVENT_TYPES: frozenset[str] = frozenset(
    {
        "checkout.session.completed",
        "checkout.session.async_payment_succeeded",
    }
)
