"""Observabilidade: contexto de logs e métricas.

Uso:
    from app.observability import get_correlation_id, order_context
    from app.observability import record_latency, record_channel_outcome
"""

from app.observability.correlation import (
    get_correlation_id,
    get_order_id,
    order_context,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_channel_outcome,
    record_latency,
    record_webhook_event,
)

__all__ = [
    "get_correlation_id",
    "get_order_id",
    "order_context",
    "record_channel_outcome",
    "record_latency",
    "record_webhook_event",
    "reset_correlation_id",
    "set_correlation_id",
]
