"""Protocolos (contratos) entre app e implementações concretas.

Evita dependência direta da camada api dentro de app/services.
"""

from app.protocols.channel_adapter import ChannelAdapterProtocol
from app.protocols.payment_gateway import PaymentGatewayProtocol

__all__ = [
    "ChannelAdapterProtocol",
    "PaymentGatewayProtocol",
]
