"""Normalização de sessões de checkout pagas."""

from __future__ import annotations

import json

import pytest

from app.constants.orders import OrderType, PaymentMethod
from app.domain.order_sources import PaymentSessionSource
from app.services.order_normalizer import OrderNormalizer
from tests.fakes.orders import checkout_session, line_item
from utils.errors import ValidationError

DELIVERY_METADATA = {
    "orderType": "delivery",
    "customerName": "Jean Dupont",
    "customerPhone": "0611223344",
    "customerAddress": "12 rue Victor Hugo, 62800 Liévin",
}


@pytest.fixture
def normalizer() -> OrderNormalizer:
    return OrderNormalizer()


def test_items_json_is_preferred_over_line_items(normalizer: OrderNormalizer) -> None:
    session = checkout_session()
    lines = [line_item("Burger", 1, 1700), line_item("Livraison à domicile", 1, 500)]

    order = normalizer.from_payment_session(session, lines)

    assert [item.name for item in order.items] == ["Burger"]
    assert order.items[0].description == "sans oignons"
    assert order.total_amount_minor_units == 2200
    assert order.delivery_fee_minor_units == 500
    assert order.payment_method == PaymentMethod.CARD
    assert order.order_type == OrderType.DELIVERY


def test_order_id_comes_from_session(normalizer: OrderNormalizer) -> None:
    order = normalizer.from_payment_session(checkout_session("cs_test_a1B2c3D4e5F6g7H8"))
    assert order.order_id == "E5F6G7H8"


def test_french_address_is_split(normalizer: OrderNormalizer) -> None:
    customer = normalizer.from_payment_session(checkout_session()).customer

    assert customer.address == "12 rue Victor Hugo"
    assert customer.postal_code == "62800"
    assert customer.city == "Liévin"
    assert (customer.first_name, customer.last_name) == ("Jean", "Dupont")


def test_line_items_fallback_excludes_delivery_fee_line(normalizer: OrderNormalizer) -> None:
    session = checkout_session(metadata=dict(DELIVERY_METADATA))
    lines = [line_item("Tacos XL", 2, 1700), line_item("Livraison à domicile", 1, 500)]

    order = normalizer.from_payment_session(session, lines)

    assert [(item.name, item.quantity, item.unit_price_minor_units) for item in order.items] == [
        ("Tacos XL", 2, 850)
    ]
    assert order.total_amount_minor_units == 2200


def test_configurable_delivery_label_is_excluded() -> None:
    normalizer = OrderNormalizer(delivery_fee_label="Delivery")
    session = checkout_session(metadata=dict(DELIVERY_METADATA))
    lines = [line_item("Burger", 1, 1700), line_item("Delivery", 1, 500)]

    order = normalizer.from_payment_session(session, lines)

    assert [item.name for item in order.items] == ["Burger"]
    assert order.total_amount_minor_units == 2200
    assert order.delivery_fee_minor_units == 500


def test_discounted_pickup_line_keeps_exact_paid_amount(normalizer: OrderNormalizer) -> None:
    session = checkout_session(
        amount_total=1000,
        metadata={
            "orderType": "pickup",
            "customerName": "Jean Dupont",
            "itemsJson": json.dumps([{"name": "Tacos", "qty": 3, "price": 400}]),
        },
    )

    order = normalizer.from_payment_session(session, [line_item("Tacos", 3, 1000)])

    assert [(item.name, item.quantity, item.unit_price_minor_units) for item in order.items] == [
        ("3x Tacos", 1, 1000)
    ]
    assert order.total_amount_minor_units == 1000
    assert order.delivery_fee_minor_units == 0
    assert order.payment_method == PaymentMethod.CARD


def test_divisible_discounted_line_keeps_quantity(normalizer: OrderNormalizer) -> None:
    session = checkout_session(amount_total=900, metadata={"orderType": "pickup"})

    order = normalizer.from_payment_session(
        session, [line_item("Tacos", 3, 900), line_item("Coca", 1, 0)]
    )

    assert [(item.name, item.quantity, item.unit_price_minor_units) for item in order.items] == [
        ("Tacos", 3, 300),
        ("Coca", 1, 0),
    ]


def test_unparsable_items_json_falls_back(normalizer: OrderNormalizer) -> None:
    session = checkout_session(
        amount_total=1700,
        metadata={"orderType": "pickup", "customerName": "Jean", "itemsJson": "[{not json"},
    )

    order = normalizer.from_payment_session(session, [line_item("Burger", 1, 1700)])

    assert [item.name for item in order.items] == ["Burger"]


def test_items_json_inconsistent_with_paid_total_falls_back(normalizer: OrderNormalizer) -> None:
    session = checkout_session(
        amount_total=1700,
        metadata={
            "orderType": "pickup",
            "itemsJson": json.dumps([{"name": "Old cart", "qty": 1, "price": 900}]),
        },
    )

    order = normalizer.from_payment_session(session, [line_item("Burger", 1, 1700)])

    assert [item.name for item in order.items] == ["Burger"]
    assert order.total_amount_minor_units == 1700


def test_embedded_line_items_are_accepted_through_normalize(normalizer: OrderNormalizer) -> None:
    session = checkout_session(amount_total=1700, metadata={"orderType": "pickup"})
    source = PaymentSessionSource(session=session, line_items=[line_item("Burger", 1, 1700)])

    assert normalizer.normalize(source).items[0].name == "Burger"


def test_pickup_without_email_proceeds(normalizer: OrderNormalizer) -> None:
    session = checkout_session(
        amount_total=1700, customer_email=None, metadata={"orderType": "pickup"}
    )

    order = normalizer.from_payment_session(session, [line_item("Burger", 1, 1700)])

    assert order.customer.email is None


def test_delivery_without_email_is_rejected(normalizer: OrderNormalizer) -> None:
    session = checkout_session(customer_email=None)

    with pytest.raises(ValidationError, match="email"):
        normalizer.from_payment_session(session)


def test_email_falls_back_to_metadata(normalizer: OrderNormalizer) -> None:
    metadata = {**DELIVERY_METADATA, "customerEmail": "meta@example.com"}
    session = checkout_session(customer_email=None, metadata=metadata)

    order = normalizer.from_payment_session(session, [line_item("Burger", 1, 1700)])

    assert order.customer.email == "meta@example.com"


def test_session_email_wins_over_details(normalizer: OrderNormalizer) -> None:
    session = checkout_session()
    session["customer_details"]["email"] = "details@example.com"

    order = normalizer.from_payment_session(session)

    assert order.customer.email == "client@example.com"


def test_delivery_without_address_is_rejected(normalizer: OrderNormalizer) -> None:
    metadata = {k: v for k, v in DELIVERY_METADATA.items() if k != "customerAddress"}
    session = checkout_session(metadata=metadata)

    with pytest.raises(ValidationError):
        normalizer.from_payment_session(session, [line_item("Burger", 1, 1700)])


def test_no_item_source_is_rejected(normalizer: OrderNormalizer) -> None:
    session = checkout_session(amount_total=500, metadata={"orderType": "pickup"})

    with pytest.raises(ValidationError, match="no usable item source"):
        normalizer.from_payment_session(session, [line_item("Livraison à domicile", 1, 500)])


def test_unknown_order_type_defaults_to_pickup(normalizer: OrderNormalizer) -> None:
    session = checkout_session(amount_total=1700, metadata={"orderType": "drone"})

    order = normalizer.from_payment_session(session, [line_item("Burger", 1, 1700)])

    assert order.order_type == OrderType.PICKUP
