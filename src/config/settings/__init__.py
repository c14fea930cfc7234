"""Agregador de settings do serviço de pedidos.

Re-exporta todas as settings e funções de cada módulo.
Organização por provedor para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.brevo import BREVO_API_BASE_URL, BrevoSettings, get_brevo_settings
from config.settings.dispatch import DispatchSettings, get_dispatch_settings

# Aggregate
from config.settings.notifier import NotifierSettings, get_notifier_settings
from config.settings.restaurant import (
    RestaurantProfile,
    RestaurantProfileError,
    get_restaurant_profile,
    load_restaurant_profile,
)

# Payment gateway
from config.settings.stripe import StripeSettings, get_stripe_settings
from config.settings.twilio import TWILIO_API_BASE_URL, TwilioSettings, get_twilio_settings

__all__ = [
    # Constants
    "BREVO_API_BASE_URL",
    "TWILIO_API_BASE_URL",
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    # Channels
    "BrevoSettings",
    "DispatchSettings",
    "Environment",
    "NotifierSettings",
    "RestaurantProfile",
    "RestaurantProfileError",
    "StripeSettings",
    "TwilioSettings",
    "get_base_settings",
    "get_brevo_settings",
    "get_dispatch_settings",
    "get_notifier_settings",
    "get_restaurant_profile",
    "get_stripe_settings",
    "get_twilio_settings",
    "load_restaurant_profile",
]
