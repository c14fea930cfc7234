"""Settings do canal WhatsApp via Twilio.

O canal é opcional: sem credenciais completas o adapter apenas
registra `skipped`, nunca falha o pedido.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TWILIO_API_BASE_URL: str = "https://api.twilio.com"
TWILIO_API_VERSION: str = "2010-04-01"


@dataclass(frozen=True)
class TwilioSettings:
    """Configurações do canal WhatsApp (Twilio Messages API).

    Attributes:
        account_sid: Account SID (também usado como usuário do Basic auth)
        auth_token: Auth Token (senha do Basic auth)
        whatsapp_from: Remetente, ex: whatsapp:+14155238886
        operator_number: Destinatário do restaurante, ex: whatsapp:+33600000000
        api_base_url: URL base da API
        request_timeout_seconds: Timeout por requisição HTTP
    """

    account_sid: str = ""
    auth_token: str = ""
    whatsapp_from: str = ""
    operator_number: str = ""

    api_base_url: str = TWILIO_API_BASE_URL
    request_timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        """True quando todas as credenciais necessárias estão presentes."""
        return all(
            (self.account_sid, self.auth_token, self.whatsapp_from, self.operator_number)
        )

    @property
    def messages_endpoint(self) -> str:
        """URL de criação de mensagens da conta configurada."""
        if not self.account_sid:
            raise ValueError("account_sid é obrigatório")
        return (
            f"{self.api_base_url}/{TWILIO_API_VERSION}/Accounts/"
            f"{self.account_sid}/Messages.json"
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas do canal.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.account_sid:
            errors.append("TWILIO_ACCOUNT_SID não configurado")
        if not self.auth_token:
            errors.append("TWILIO_AUTH_TOKEN não configurado")
        if not self.whatsapp_from:
            errors.append("TWILIO_WHATSAPP_FROM não configurado")
        if not self.operator_number:
            errors.append("RESTAURANT_WHATSAPP_NUMBER não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TWILIO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> TwilioSettings:
    """Carrega TwilioSettings a partir de variáveis de ambiente."""
    return TwilioSettings(
        account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
        auth_token=os.getenv("TWILIO_AUTH_TOKEN", ""),
        whatsapp_from=os.getenv("TWILIO_WHATSAPP_FROM", ""),
        operator_number=os.getenv("RESTAURANT_WHATSAPP_NUMBER", ""),
        api_base_url=os.getenv("TWILIO_API_BASE_URL", TWILIO_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TWILIO_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_twilio_settings() -> TwilioSettings:
    """Retorna instância cacheada de TwilioSettings."""
    return _load_from_env()
