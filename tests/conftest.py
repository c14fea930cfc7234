"""Configuração do pytest para o projeto order_notifier."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e a raiz do repo (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from app.constants.orders import OrderType, PaymentMethod  # noqa: E402
from app.domain.order import Order  # noqa: E402
from config.settings import (  # noqa: E402
    BaseSettings,
    BrevoSettings,
    DispatchSettings,
    NotifierSettings,
    RestaurantProfile,
    StripeSettings,
    TwilioSettings,
)
from tests.fakes.orders import WEBHOOK_SECRET, build_order  # noqa: E402


@pytest.fixture
def restaurant_profile() -> RestaurantProfile:
    return RestaurantProfile(
        name="DWICH62",
        address="135 Ter Rue Jules Guesde, 62800 Liévin",
        phone="07 67 46 95 02",
        timezone="Europe/Paris",
    )


@pytest.fixture
def notifier_settings(restaurant_profile: RestaurantProfile) -> NotifierSettings:
    """Settings com todos os canais configurados."""
    return NotifierSettings(
        base=BaseSettings(environment="development"),
        twilio=TwilioSettings(
            account_sid="AC123",
            auth_token="token",
            whatsapp_from="whatsapp:+14155238886",
            operator_number="whatsapp:+33600000000",
        ),
        brevo=BrevoSettings(
            api_key="xkeysib-test",
            sender_email="orders@dwich62.fr",
            operator_email="kitchen@dwich62.fr",
        ),
        stripe=StripeSettings(secret_key="sk_test_123", webhook_secret=WEBHOOK_SECRET),
        dispatch=DispatchSettings(channel_timeout_seconds=1.0),
        restaurant=restaurant_profile,
    )


@pytest.fixture
def pickup_order() -> Order:
    return build_order()


@pytest.fixture
def delivery_order() -> Order:
    return build_order(
        order_type=OrderType.DELIVERY,
        payment_method=PaymentMethod.CARD,
        total=2400,
        notes="Sonner deux fois",
    )
