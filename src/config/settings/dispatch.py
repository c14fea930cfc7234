"""Settings do fan-out de notificações."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class DispatchSettings:
    """Configurações do dispatcher.

    Attributes:
        channel_timeout_seconds: Tempo máximo por canal, incluindo renderização
            e a chamada HTTP. Estourado o limite o canal vira `failed`.
    """

    channel_timeout_seconds: float = 15.0

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.channel_timeout_seconds <= 0:
            errors.append("NOTIFY_CHANNEL_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> DispatchSettings:
    return DispatchSettings(
        channel_timeout_seconds=float(os.getenv("NOTIFY_CHANNEL_TIMEOUT_SECONDS", "15")),
    )


@lru_cache(maxsize=1)
def get_dispatch_settings() -> DispatchSettings:
    """Retorna instância cacheada de DispatchSettings."""
    return _load_from_env()
