"""Renderizadores de WhatsApp e emails."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from api.payload_builders.email import (
    build_customer_email,
    build_operator_email,
    customer_subject,
    operator_subject,
)
from api.payload_builders.formatting import format_local_time, format_money
from api.payload_builders.whatsapp import build_order_text
from app.constants.orders import OrderType, PaymentMethod
from app.domain.order import Order
from config.settings import RestaurantProfile
from tests.fakes.orders import build_order


@pytest.mark.parametrize(
    ("minor_units", "expected"),
    [(0, "0,00€"), (5, "0,05€"), (1250, "12,50€"), (123456, "1234,56€")],
)
def test_format_money(minor_units: int, expected: str) -> None:
    assert format_money(minor_units) == expected


def test_local_time_uses_restaurant_timezone() -> None:
    moment = datetime(2026, 7, 14, 10, 30, tzinfo=UTC)

    assert format_local_time(moment, "Europe/Paris") == "14/07/2026 12:30:00"
    assert format_local_time(moment, "Not/AZone") == "14/07/2026 12:30:00"


def test_whatsapp_text_for_pickup_to_pay_on_site(
    pickup_order: Order, restaurant_profile: RestaurantProfile
) -> None:
    text = build_order_text(pickup_order, restaurant_profile)

    assert text.startswith("🏪 *COMMANDE SUR PLACE*")
    assert "💵 *PAIEMENT AU RETRAIT*" in text
    assert "📋 *Commande #ABCD1234*" in text
    assert "💰 *Total: 19,00€*" in text
    assert "• 2x Tacos (8,50€)\n   → Sauce algérienne" in text
    assert "🏠" not in text
    assert "Livraison (" not in text


def test_whatsapp_text_for_paid_delivery(
    delivery_order: Order, restaurant_profile: RestaurantProfile
) -> None:
    text = build_order_text(delivery_order, restaurant_profile)

    assert text.startswith("🍔 *NOUVELLE COMMANDE DWICH62*")
    assert "💳 *PAYÉ PAR CARTE*" in text
    assert "🏠 *Adresse:* 12 rue Victor Hugo, 62800 Liévin" in text
    assert "• Livraison (5,00€)" in text
    assert "📝 *Notes:* Sonner deux fois" in text


def test_whatsapp_text_marks_missing_email() -> None:
    text = build_order_text(build_order(email=None), RestaurantProfile())

    assert "📧 *Email:* N/A" in text


def test_subjects(pickup_order: Order, delivery_order: Order, restaurant_profile: RestaurantProfile) -> None:
    assert customer_subject(pickup_order, restaurant_profile) == (
        "✅ Commande #ABCD1234 - Retrait sur place - DWICH62"
    )
    assert customer_subject(delivery_order, restaurant_profile) == "✅ Commande #ABCD1234 confirmée - DWICH62"
    assert operator_subject(pickup_order) == "🏪 SUR PLACE #ABCD1234 - 19,00€ - À ENCAISSER"
    assert operator_subject(delivery_order) == "🚨 COMMANDE #ABCD1234 - 24,00€ - LIVRAISON"


def test_paid_pickup_operator_subject() -> None:
    order = build_order(payment_method=PaymentMethod.CARD)

    assert operator_subject(order) == "🚨 COMMANDE #ABCD1234 - 19,00€ - SUR PLACE"


def test_customer_email_escapes_free_text(restaurant_profile: RestaurantProfile) -> None:
    order = build_order(notes="<script>alert(1)</script>")

    content = build_customer_email(order, restaurant_profile)

    assert "<script>" not in content.html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in content.html
    assert "Total à payer" in content.html
    assert "135 Ter Rue Jules Guesde, 62800 Liévin" in content.html


def test_customer_email_for_paid_delivery(
    delivery_order: Order, restaurant_profile: RestaurantProfile
) -> None:
    content = build_customer_email(delivery_order, restaurant_profile)

    assert "Total payé" in content.html
    assert "Livraison estimée : 30-45 minutes" in content.html
    assert "12 rue Victor Hugo, 62800 Liévin" in content.html
    assert "5,00€" in content.html


def test_operator_ticket_lists_items_and_amount_due(
    pickup_order: Order, restaurant_profile: RestaurantProfile
) -> None:
    content = build_operator_email(pickup_order, restaurant_profile)

    assert "TOTAL À ENCAISSER" in content.html
    assert "2x Tacos" in content.html
    assert "Sauce algérienne" in content.html
    assert "17,00€" in content.html
    assert "Retrait sur place" in content.html


def test_operator_ticket_for_delivery_shows_address(
    delivery_order: Order, restaurant_profile: RestaurantProfile
) -> None:
    assert delivery_order.order_type == OrderType.DELIVERY

    content = build_operator_email(delivery_order, restaurant_profile)

    assert "🚚 LIVRAISON" in content.html
    assert "12 rue Victor Hugo, 62800 Liévin" in content.html
    assert "Sonner deux fois" in content.html
