"""Registro de métricas via structured logging.

As métricas são linhas de log com `metric_type` e podem ser agregadas
posteriormente (ex: Cloud Logging / BigQuery).

Métricas suportadas:
- Latência: tempo de cada canal e do fan-out completo
- Outcome de canal: counter por canal e status (delivered/skipped/failed)
- Webhook: counter por tipo de evento e decisão (processed/ignored/rejected)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "dispatcher", "whatsapp")
        operation: Nome da operação (ex: "dispatch", "send")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )


def record_channel_outcome(channel: str, status: str, detail: str | None = None) -> None:
    """Registra o resultado de um canal de notificação."""
    extra: dict[str, object] = {
        "metric_type": "channel_outcome",
        "channel": channel,
        "status": status,
    }
    if detail:
        extra["detail"] = detail
    logger.info("metric_channel_outcome", extra=extra)


def record_webhook_event(event_type: str, decision: str) -> None:
    """Registra a decisão tomada para um evento de webhook recebido."""
    logger.info(
        "metric_webhook_event",
        extra={
            "metric_type": "webhook_event",
            "event_type": event_type,
            "decision": decision,
        },
    )
