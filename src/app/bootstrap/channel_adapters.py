"""Adapters concretos dos canais de notificação (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api para o fan-out.
Cada adapter faz no máximo uma chamada externa e traduz o resultado em
ChannelOutcome. DeliveryError vira `failed`; configuração ausente vira
`skipped`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.brevo import BrevoEmailClient, EmailMessage
from api.connectors.twilio import TwilioWhatsAppClient
from api.payload_builders.email import build_customer_email, build_operator_email
from api.payload_builders.whatsapp import build_order_text
from app.constants.orders import ChannelName
from app.domain.notification import ChannelOutcome
from config.logging import mask_email
from utils.errors import DeliveryError

if TYPE_CHECKING:
    from app.domain.order import Order
    from config.settings import BrevoSettings, RestaurantProfile, TwilioSettings

logger = logging.getLogger(__name__)


class WhatsAppOrderAdapter:
    """Aviso de novo pedido para o WhatsApp do restaurante."""

    name = ChannelName.WHATSAPP.value

    def __init__(
        self,
        settings: TwilioSettings,
        profile: RestaurantProfile,
        client: TwilioWhatsAppClient | None = None,
    ) -> None:
        self._settings = settings
        self._profile = profile
        self._client = client or TwilioWhatsAppClient(settings)

    async def send(self, order: Order) -> ChannelOutcome:
        if not self._settings.is_configured:
            return ChannelOutcome.skipped("twilio_not_configured")

        body = build_order_text(order, self._profile)
        try:
            result = await self._client.send_text(body)
        except DeliveryError as exc:
            return ChannelOutcome.failed(str(exc))

        if result.already_delivered:
            return ChannelOutcome.delivered("already_delivered")
        logger.info("whatsapp_order_sent", extra={"channel": self.name})
        return ChannelOutcome.delivered()


class CustomerEmailAdapter:
    """Confirmação por email para o cliente."""

    name = ChannelName.CUSTOMER_EMAIL.value

    def __init__(
        self,
        settings: BrevoSettings,
        profile: RestaurantProfile,
        client: BrevoEmailClient | None = None,
    ) -> None:
        self._settings = settings
        self._profile = profile
        self._client = client or BrevoEmailClient(settings)

    async def send(self, order: Order) -> ChannelOutcome:
        if not self._settings.is_configured:
            return ChannelOutcome.skipped("brevo_not_configured")
        email = order.customer.email
        if not email:
            return ChannelOutcome.skipped("no_customer_email")

        content = build_customer_email(order, self._profile)
        message = EmailMessage(
            to_email=email,
            to_name=order.customer.full_name,
            subject=content.subject,
            html_content=content.html,
        )
        try:
            await self._client.send(message, channel=self.name)
        except DeliveryError as exc:
            return ChannelOutcome.failed(str(exc))

        logger.info(
            "customer_email_sent",
            extra={"channel": self.name, "recipient": mask_email(email)},
        )
        return ChannelOutcome.delivered()


class OperatorEmailAdapter:
    """Ticket do pedido para a caixa de email do restaurante."""

    name = ChannelName.OPERATOR_EMAIL.value

    def __init__(
        self,
        settings: BrevoSettings,
        profile: RestaurantProfile,
        client: BrevoEmailClient | None = None,
    ) -> None:
        self._settings = settings
        self._profile = profile
        self._client = client or BrevoEmailClient(settings)

    async def send(self, order: Order) -> ChannelOutcome:
        if not self._settings.is_configured:
            return ChannelOutcome.skipped("brevo_not_configured")
        if not self._settings.operator_email:
            return ChannelOutcome.skipped("operator_email_not_configured")

        content = build_operator_email(order, self._profile)
        message = EmailMessage(
            to_email=self._settings.operator_email,
            to_name=self._profile.name,
            subject=content.subject,
            html_content=content.html,
        )
        try:
            await self._client.send(message, channel=self.name)
        except DeliveryError as exc:
            return ChannelOutcome.failed(str(exc))

        logger.info("operator_email_sent", extra={"channel": self.name})
        return ChannelOutcome.delivered()
