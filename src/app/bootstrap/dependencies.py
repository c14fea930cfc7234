"""Factories: criação de implementações concretas a partir das settings.

Todas recebem `NotifierSettings` opcional; sem ele usam o agregado
cacheado do processo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.brevo import create_brevo_client
from api.connectors.stripe import StripeCheckoutGateway
from api.connectors.twilio import create_twilio_client
from app.bootstrap.channel_adapters import (
    CustomerEmailAdapter,
    OperatorEmailAdapter,
    WhatsAppOrderAdapter,
)
from app.services import NotificationDispatcher, OrderNormalizer
from app.use_cases.orders import ProcessPaymentWebhookUseCase, SubmitDirectOrderUseCase
from config.settings import get_notifier_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols import ChannelAdapterProtocol, PaymentGatewayProtocol
    from config.settings import NotifierSettings

logger = logging.getLogger(__name__)


def create_order_normalizer(settings: NotifierSettings | None = None) -> OrderNormalizer:
    settings = settings or get_notifier_settings()
    return OrderNormalizer(delivery_fee_label=settings.stripe.delivery_fee_label)


def create_channel_adapters(
    settings: NotifierSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ChannelAdapterProtocol]:
    """WhatsApp, email do cliente e email do restaurante, nesta ordem.

    Args:
        settings: Agregado de settings.
        transport: Transporte httpx compartilhado pelos clientes (testes).
    """
    settings = settings or get_notifier_settings()
    brevo_client = create_brevo_client(settings.brevo, transport=transport)
    adapters: list[ChannelAdapterProtocol] = [
        WhatsAppOrderAdapter(
            settings.twilio,
            settings.restaurant,
            client=create_twilio_client(settings.twilio, transport=transport),
        ),
        CustomerEmailAdapter(settings.brevo, settings.restaurant, client=brevo_client),
        OperatorEmailAdapter(settings.brevo, settings.restaurant, client=brevo_client),
    ]
    logger.info(
        "channel_adapters_created",
        extra={"configured_channels": list(settings.configured_channels)},
    )
    return adapters


def create_notification_dispatcher(
    settings: NotifierSettings | None = None,
    adapters: list[ChannelAdapterProtocol] | None = None,
) -> NotificationDispatcher:
    settings = settings or get_notifier_settings()
    return NotificationDispatcher(
        adapters if adapters is not None else create_channel_adapters(settings),
        channel_timeout_seconds=settings.dispatch.channel_timeout_seconds,
    )


def create_payment_gateway(settings: NotifierSettings | None = None) -> PaymentGatewayProtocol:
    settings = settings or get_notifier_settings()
    return StripeCheckoutGateway(settings.stripe)


def create_submit_direct_order_use_case(
    settings: NotifierSettings | None = None,
) -> SubmitDirectOrderUseCase:
    settings = settings or get_notifier_settings()
    return SubmitDirectOrderUseCase(
        normalizer=create_order_normalizer(settings),
        dispatcher=create_notification_dispatcher(settings),
    )


def create_process_payment_webhook_use_case(
    settings: NotifierSettings | None = None,
) -> ProcessPaymentWebhookUseCase:
    settings = settings or get_notifier_settings()
    return ProcessPaymentWebhookUseCase(
        normalizer=create_order_normalizer(settings),
        dispatcher=create_notification_dispatcher(settings),
        gateway=create_payment_gateway(settings),
    )
