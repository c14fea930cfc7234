"""Contexto da requisição (correlation_id e order_id) para os logs.

Usa ContextVar para ser async-safe: cada requisição e cada tarefa do
fan-out enxergam o próprio valor.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_order_id: ContextVar[str] = ContextVar("order_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID v4 quando ausente."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def get_order_id() -> str:
    """Retorna o order_id em processamento (ou string vazia)."""
    return _order_id.get()


@contextmanager
def order_context(order_id: str) -> Iterator[None]:
    """Associa `order_id` a todos os logs emitidos dentro do bloco."""
    token = _order_id.set(order_id)
    try:
        yield
    finally:
        _order_id.reset(token)
