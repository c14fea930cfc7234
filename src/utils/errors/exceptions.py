"""Exceções de domínio do serviço de notificação de pedidos.

Apenas AuthenticationError e ValidationError podem alterar o status HTTP
devolvido ao chamador. Falhas de canal ficam contidas no dispatcher.
"""

from __future__ import annotations


class OrderNotifierError(Exception):
    """Base para erros do serviço."""


class AuthenticationError(OrderNotifierError):
    """Assinatura do webhook ausente, malformada ou inválida."""


class InvalidEventError(AuthenticationError):
    """Payload assinado corretamente, mas que não é um evento legível."""


class ValidationError(OrderNotifierError):
    """Não foi possível construir um Order bem formado."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class DeliveryError(OrderNotifierError):
    """Provedor externo recusou ou não respondeu ao envio de um canal."""

    def __init__(
        self,
        message: str,
        *,
        channel: str,
        status_code: int | None = None,
        provider_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.channel = channel
        self.status_code = status_code
        self.provider_code = provider_code


class PaymentGatewayError(OrderNotifierError):
    """Falha ao consultar a sessão de pagamento no gateway."""
