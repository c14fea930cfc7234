"""Settings do gateway de pagamento (Stripe).

`webhook_secret` é obrigatório para aceitar qualquer evento: sem ele
todo webhook é rejeitado com 400.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DELIVERY_FEE_LABEL: str = "Livraison à domicile"


@dataclass(frozen=True)
class StripeSettings:
    """Configurações do gateway de pagamento.

    Attributes:
        secret_key: Chave secreta da API (consulta de sessões)
        webhook_secret: Segredo compartilhado para assinatura dos webhooks
        webhook_tolerance_seconds: Idade máxima aceita do timestamp assinado
        delivery_fee_label: Descrição da linha sintética de taxa de entrega
        request_timeout_seconds: Timeout das chamadas à API
    """

    secret_key: str = ""
    webhook_secret: str = ""
    webhook_tolerance_seconds: int = 300
    delivery_fee_label: str = DEFAULT_DELIVERY_FEE_LABEL
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas do gateway.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.secret_key:
            errors.append("STRIPE_SECRET_KEY não configurado")
        if not self.webhook_secret:
            errors.append("STRIPE_WEBHOOK_SECRET não configurado")
        if self.webhook_tolerance_seconds < 0:
            errors.append("STRIPE_WEBHOOK_TOLERANCE_SECONDS deve ser >= 0")
        if not self.delivery_fee_label:
            errors.append("DELIVERY_FEE_LABEL não pode ser vazio")

        return errors


def _load_from_env() -> StripeSettings:
    """Carrega StripeSettings de variáveis de ambiente."""
    return StripeSettings(
        secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
        webhook_secret=os.getenv("STRIPE_WEBHOOK_SECRET", ""),
        webhook_tolerance_seconds=int(
            os.getenv("STRIPE_WEBHOOK_TOLERANCE_SECONDS", "300")
        ),
        delivery_fee_label=os.getenv("DELIVERY_FEE_LABEL", DEFAULT_DELIVERY_FEE_LABEL),
        request_timeout_seconds=float(
            os.getenv("STRIPE_REQUEST_TIMEOUT_SECONDS", "10")
        ),
    )


@lru_cache(maxsize=1)
def get_stripe_settings() -> StripeSettings:
    """Retorna instância cacheada de StripeSettings."""
    return _load_from_env()
