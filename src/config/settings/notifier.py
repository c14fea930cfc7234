"""Configuração agregada e imutável do serviço.

Construída uma única vez no startup e injetada no guard de webhook e em
cada adapter de canal. Nenhum componente lê variáveis de ambiente depois
disso.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from config.settings.base import BaseSettings, get_base_settings
from config.settings.brevo import BrevoSettings, get_brevo_settings
from config.settings.dispatch import DispatchSettings, get_dispatch_settings
from config.settings.restaurant import RestaurantProfile, get_restaurant_profile
from config.settings.stripe import StripeSettings, get_stripe_settings
from config.settings.twilio import TwilioSettings, get_twilio_settings


@dataclass(frozen=True)
class NotifierSettings:
    """Todas as settings necessárias para receber e notificar pedidos."""

    base: BaseSettings = field(default_factory=BaseSettings)
    twilio: TwilioSettings = field(default_factory=TwilioSettings)
    brevo: BrevoSettings = field(default_factory=BrevoSettings)
    stripe: StripeSettings = field(default_factory=StripeSettings)
    dispatch: DispatchSettings = field(default_factory=DispatchSettings)
    restaurant: RestaurantProfile = field(default_factory=RestaurantProfile)

    @property
    def configured_channels(self) -> tuple[str, ...]:
        """Canais com configuração suficiente para tentar envio."""
        channels: list[str] = []
        if self.twilio.is_configured:
            channels.append("whatsapp")
        if self.brevo.is_configured:
            channels.extend(("customer_email", "operator_email"))
        return tuple(channels)

    def validate(self) -> list[str]:
        """Agrega erros de validação prefixados pelo domínio."""
        errors: list[str] = []
        errors.extend(f"base: {error}" for error in self.base.validate())
        errors.extend(f"twilio: {error}" for error in self.twilio.validate())
        errors.extend(f"brevo: {error}" for error in self.brevo.validate())
        errors.extend(f"stripe: {error}" for error in self.stripe.validate())
        errors.extend(f"dispatch: {error}" for error in self.dispatch.validate())
        return errors


@lru_cache(maxsize=1)
def get_notifier_settings() -> NotifierSettings:
    """Retorna o agregado cacheado (singleton de processo)."""
    return NotifierSettings(
        base=get_base_settings(),
        twilio=get_twilio_settings(),
        brevo=get_brevo_settings(),
        stripe=get_stripe_settings(),
        dispatch=get_dispatch_settings(),
        restaurant=get_restaurant_profile(),
    )
