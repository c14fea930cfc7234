"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em api/connectors/.
"""

from app.services.notification_dispatcher import NotificationDispatcher
from app.services.order_normalizer import OrderNormalizer

__all__ = [
    "NotificationDispatcher",
    "OrderNormalizer",
]
