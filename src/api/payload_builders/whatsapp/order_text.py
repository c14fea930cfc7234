"""Texto do aviso de novo pedido enviado ao restaurante por WhatsApp."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.formatting import (
    format_local_time,
    format_money,
    or_not_available,
    order_type_label,
)
from app.constants.orders import OrderType

if TYPE_CHECKING:
    from app.domain.order import Order, OrderItem
    from config.settings import RestaurantProfile

SEPARATOR = "━━━━━━━━━━━━━━━━━━━"


def _item_line(item: OrderItem) -> str:
    line = f"• {item.quantity}x {item.name} ({format_money(item.unit_price_minor_units)})"
    if item.description:
        line += f"\n   → {item.description}"
    return line


def build_order_text(order: Order, profile: RestaurantProfile) -> str:
    """Mensagem em texto simples (formatação *negrito* do WhatsApp).

    Variações: pago com cartão vs. a cobrar na retirada; retirada vs. entrega.
    """
    customer = order.customer
    if order.is_paid:
        header = f"🍔 *NOUVELLE COMMANDE {profile.name}*"
        payment = "💳 *PAYÉ PAR CARTE*"
    else:
        header = "🏪 *COMMANDE SUR PLACE*"
        payment = "💵 *PAIEMENT AU RETRAIT*"

    lines = [
        header,
        "",
        SEPARATOR,
        f"📋 *Commande #{order.order_id}*",
        f"💰 *Total: {format_money(order.total_amount_minor_units)}*",
        payment,
        SEPARATOR,
        "",
        f"👤 *Client:* {or_not_available(customer.full_name)}",
        f"📞 *Tél:* {or_not_available(customer.phone)}",
        f"📧 *Email:* {or_not_available(customer.email)}",
        "",
        f"📍 *Mode:* {order_type_label(order.order_type)}",
    ]
    if order.order_type == OrderType.DELIVERY:
        lines.append(f"🏠 *Adresse:* {customer.delivery_address_line}")
    lines += [
        "",
        SEPARATOR,
        "🍽️ *DÉTAILS:*",
        SEPARATOR,
        *(_item_line(item) for item in order.items),
    ]
    if order.delivery_fee_minor_units > 0:
        lines.append(f"• Livraison ({format_money(order.delivery_fee_minor_units)})")
    lines.append(SEPARATOR)
    if order.notes:
        lines.append(f"📝 *Notes:* {order.notes}")
    lines += ["", f"⏰ {format_local_time(order.created_at, profile.timezone)}"]
    return "\n".join(lines)
