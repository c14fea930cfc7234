"""Gerador de códigos curtos de pedido.

Formato: 8 caracteres base-36 em maiúsculas = 4 de tempo (milissegundos)
+ 4 aleatórios. O componente de tempo é um relógio lógico estritamente
crescente por processo, então duas chamadas no mesmo milissegundo nunca
repetem o prefixo; entre processos a unicidade vem da parte aleatória.
"""

from __future__ import annotations

import secrets
import string
import threading
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

ORDER_ID_LENGTH = 8
_TIME_CHARS = 4
_RANDOM_CHARS = ORDER_ID_LENGTH - _TIME_CHARS
_ALPHABET = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    """Converte inteiro não negativo para base 36 (maiúsculas)."""
    if value < 0:
        raise ValueError("value deve ser >= 0")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class OrderIdGenerator:
    """Gera order ids com prefixo temporal monotônico."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _now_ms
        self._last_ms = -1
        self._lock = threading.Lock()

    def _next_tick(self) -> int:
        with self._lock:
            tick = max(self._clock(), self._last_ms + 1)
            self._last_ms = tick
            return tick

    def __call__(self) -> str:
        time_part = to_base36(self._next_tick())[-_TIME_CHARS:].rjust(_TIME_CHARS, "0")
        random_part = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_CHARS))
        return time_part + random_part


_default_generator = OrderIdGenerator()


def generate_order_id() -> str:
    """Retorna um novo order id de 8 caracteres."""
    return _default_generator()


def order_id_from_session(session_id: str) -> str:
    """Order id estável derivado do id da sessão de pagamento.

    Mesmo número na página do ticket, nos emails e em reentregas do webhook.
    """
    cleaned = "".join(ch for ch in session_id if ch.isalnum()).upper()
    if not cleaned:
        raise ValueError("session_id sem caracteres alfanuméricos")
    return cleaned[-ORDER_ID_LENGTH:].rjust(ORDER_ID_LENGTH, "0")
