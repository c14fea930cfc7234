"""Erros e helpers de parsing para a API de mensagens Twilio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# "Message already delivered / duplicate": o destinatário já recebeu a mensagem
ALREADY_DELIVERED_ERROR_CODE = 63016


@dataclass(frozen=True)
class TwilioApiError:
    """Erro retornado pela API Twilio."""

    status_code: int
    error_code: int | None
    error_message: str

    @property
    def is_already_delivered(self) -> bool:
        return self.error_code == ALREADY_DELIVERED_ERROR_CODE


def parse_twilio_error(status_code: int, response_data: dict[str, Any]) -> TwilioApiError:
    """Extrai `code`/`message` do corpo de erro da Twilio.

    Args:
        status_code: Status HTTP da resposta
        response_data: Dict do response JSON (pode estar vazio)
    """
    raw_code = response_data.get("code")
    try:
        error_code = int(raw_code) if raw_code is not None else None
    except (TypeError, ValueError):
        error_code = None
    return TwilioApiError(
        status_code=status_code,
        error_code=error_code,
        error_message=str(response_data.get("message") or "Erro desconhecido"),
    )
