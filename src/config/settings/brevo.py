"""Settings dos canais de email via Brevo (API transacional).

Os dois canais de email (cliente e restaurante) compartilham a mesma
conta Brevo; apenas o destinatário muda.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

BREVO_API_BASE_URL: str = "https://api.brevo.com/v3"
DEFAULT_SENDER_EMAIL: str = "dwich62bruay@gmail.com"
DEFAULT_SENDER_NAME: str = "DWICH62"


@dataclass(frozen=True)
class BrevoSettings:
    """Configurações do provedor de email transacional.

    Attributes:
        api_key: Chave enviada no header `api-key`
        sender_email: Endereço do remetente
        sender_name: Nome exibido do remetente
        operator_email: Caixa do restaurante (email operacional)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout por requisição HTTP
    """

    api_key: str = ""
    sender_email: str = DEFAULT_SENDER_EMAIL
    sender_name: str = DEFAULT_SENDER_NAME
    operator_email: str = DEFAULT_SENDER_EMAIL

    api_base_url: str = BREVO_API_BASE_URL
    request_timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        """True quando há chave de API e remetente."""
        return bool(self.api_key and self.sender_email)

    @property
    def send_email_endpoint(self) -> str:
        """URL de envio de email transacional."""
        return f"{self.api_base_url}/smtp/email"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de email.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("BREVO_API_KEY não configurado")
        if not self.sender_email:
            errors.append("BREVO_SENDER_EMAIL não configurado")
        if not self.operator_email:
            errors.append("RESTAURANT_EMAIL não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("BREVO_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> BrevoSettings:
    """Carrega BrevoSettings de variáveis de ambiente."""
    return BrevoSettings(
        api_key=os.getenv("BREVO_API_KEY", ""),
        sender_email=os.getenv("BREVO_SENDER_EMAIL", DEFAULT_SENDER_EMAIL),
        sender_name=os.getenv("BREVO_SENDER_NAME", DEFAULT_SENDER_NAME),
        operator_email=os.getenv("RESTAURANT_EMAIL", DEFAULT_SENDER_EMAIL),
        api_base_url=os.getenv("BREVO_API_BASE_URL", BREVO_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("BREVO_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_brevo_settings() -> BrevoSettings:
    """Retorna instância cacheada de BrevoSettings."""
    return _load_from_env()
