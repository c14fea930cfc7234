"""Filter de logging que injeta o contexto da requisição.

Campos injetados:
- correlation_id: ID de rastreamento da requisição HTTP
- order_id: pedido em processamento (vazio fora de um pedido)
- service: Nome do serviço
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _empty() -> str:
    return ""


class RequestContextFilter(logging.Filter):
    """Injeta correlation_id, order_id e service em cada record.

    Valores passados explicitamente via `extra` têm precedência.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        order_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or _empty
        self._get_order_id = order_id_getter or _empty

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        if not getattr(record, "order_id", None):
            record.order_id = self._get_order_id()
        record.service = self._service_name
        return True
