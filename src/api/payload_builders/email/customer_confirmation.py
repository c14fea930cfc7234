"""Email de confirmação enviado ao cliente."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.email._common import (
    ROW_CELL,
    EmailContent,
    document,
    item_rows,
    notes_block,
    price_cell,
)
from api.payload_builders.formatting import escape, format_local_time, format_money
from app.constants.orders import OrderType

if TYPE_CHECKING:
    from app.domain.order import Order, OrderItem
    from config.settings import RestaurantProfile

# Verde para pedido pago, âmbar para pedido a pagar na retirada
_PAID_COLORS = ("#10b981", "#059669", "#f0fdf4")
_ON_SITE_COLORS = ("#f59e0b", "#d97706", "#fef3c7")


def customer_subject(order: Order, profile: RestaurantProfile) -> str:
    if order.is_paid:
        return f"✅ Commande #{order.order_id} confirmée - {profile.name}"
    return f"✅ Commande #{order.order_id} - Retrait sur place - {profile.name}"


def _item_row(item: OrderItem) -> str:
    options = (
        f'<div style="color: #6b7280; font-size: 13px; margin-top: 4px;">→ {escape(item.description)}</div>'
        if item.description
        else ""
    )
    return (
        "<tr>"
        f'<td style="{ROW_CELL}"><div style="font-weight: 600;">{escape(item.name)}</div>{options}</td>'
        f'<td style="{ROW_CELL} text-align: center;">{item.quantity}</td>'
        f"{price_cell(item)}"
        "</tr>"
    )


def _status_line(order: Order, profile: RestaurantProfile) -> str:
    if order.order_type == OrderType.DELIVERY:
        return f"🚚 <strong>Livraison estimée : {escape(profile.delivery_eta_minutes)} minutes</strong>"
    if order.is_paid:
        return (
            "🏪 <strong>Votre commande sera prête dans "
            f"{escape(profile.pickup_ready_minutes)} minutes</strong>"
        )
    return (
        "🏪 <strong>Paiement au retrait • Prêt dans "
        f"{escape(profile.pickup_ready_minutes)} min</strong>"
    )


def _location_block(order: Order, profile: RestaurantProfile) -> str:
    if order.order_type == OrderType.DELIVERY:
        return (
            '<div style="background: #fef3c7; border-radius: 12px; padding: 20px; margin-bottom: 20px;">'
            '<h3 style="margin: 0 0 10px 0; color: #92400e;">🚚 Adresse de livraison</h3>'
            f'<p style="margin: 0; color: #78350f;">{escape(order.customer.delivery_address_line)}</p>'
            "</div>"
        )
    return (
        '<div style="background: #dbeafe; border-radius: 12px; padding: 20px; margin-bottom: 20px;">'
        '<h3 style="margin: 0 0 10px 0; color: #1e40af;">🏪 Retrait sur place</h3>'
        f'<p style="margin: 0; color: #1e3a8a;">{escape(profile.address)}</p>'
        "</div>"
    )


def build_customer_email(order: Order, profile: RestaurantProfile) -> EmailContent:
    """Confirmação HTML para o cliente (variações pago/no balcão, retirada/entrega)."""
    accent, accent_dark, highlight = _PAID_COLORS if order.is_paid else _ON_SITE_COLORS
    greeting_name = escape(order.customer.full_name or "cher client")
    total_label = "Total payé" if order.is_paid else "Total à payer"
    intro = "Votre paiement a bien été reçu !" if order.is_paid else "Merci pour votre commande !"

    fee_line = ""
    if order.delivery_fee_minor_units > 0:
        fee_line = (
            '<p style="margin: 0 0 10px 0; color: #6b7280;">Livraison: '
            f'<span style="float: right;">{format_money(order.delivery_fee_minor_units)}</span></p>'
        )

    notes = notes_block(order.notes, "Vos notes:", "#f3f4f6")
    phone_link = escape(profile.phone.replace(" ", ""))

    inner = f"""<div style="max-width: 600px; margin: 0 auto; padding: 20px;">
  <div style="background: linear-gradient(135deg, {accent} 0%, {accent_dark} 100%); border-radius: 16px 16px 0 0; padding: 40px 30px; text-align: center;">
    <div style="font-size: 48px;">🍔</div>
    <h1 style="color: white; margin: 10px 0 0 0;">{escape(profile.name)}</h1>
    <p style="color: rgba(255,255,255,0.9); margin: 10px 0 0 0;">Merci pour votre commande !</p>
  </div>
  <div style="background: white; padding: 40px 30px; border-radius: 0 0 16px 16px;">
    <div style="background: {highlight}; border: 2px solid {accent}; border-radius: 16px; padding: 25px; text-align: center; margin-bottom: 30px;">
      <p style="margin: 0;">Numéro de commande</p>
      <p style="margin: 8px 0 0 0; color: {accent_dark}; font-size: 42px; font-weight: bold;">#{order.order_id}</p>
    </div>
    <p style="color: #374151; font-size: 16px; line-height: 1.7;">Bonjour <strong>{greeting_name}</strong>,<br><br>{intro} {_status_line(order, profile)}</p>
    <h2 style="color: #111827; font-size: 18px; border-bottom: 3px solid {accent}; padding-bottom: 10px;">📋 Votre commande</h2>
    <table style="width: 100%; border-collapse: collapse;">
      <thead><tr style="background: #f9fafb;"><th style="padding: 12px; text-align: left;">PRODUIT</th><th style="padding: 12px; text-align: center;">QTÉ</th><th style="padding: 12px; text-align: right;">PRIX</th></tr></thead>
      <tbody>{item_rows(order.items, _item_row)}</tbody>
    </table>
    <div style="background: #f9fafb; border-radius: 12px; padding: 20px; margin: 20px 0;">
      {fee_line}<p style="margin: 0; font-size: 20px; font-weight: bold;">{total_label}: <span style="float: right; color: {accent};">{format_money(order.total_amount_minor_units)}</span></p>
    </div>
    {_location_block(order, profile)}
    {notes}
    <div style="text-align: center; padding-top: 20px; border-top: 1px solid #e5e7eb;">
      <p style="color: #6b7280; margin: 0 0 15px 0;">Une question ?</p>
      <a href="tel:{phone_link}" style="display: inline-block; background: {accent}; color: white; padding: 12px 24px; border-radius: 8px; text-decoration: none; font-weight: bold;">📞 {escape(profile.phone)}</a>
    </div>
  </div>
  <div style="text-align: center; padding: 20px; color: #9ca3af; font-size: 12px;">
    <p style="margin: 0;">{escape(profile.name)} - {escape(profile.address)} • {format_local_time(order.created_at, profile.timezone)}</p>
  </div>
</div>"""
    return EmailContent(
        subject=customer_subject(order, profile),
        html=document("margin: 0; padding: 0; background-color: #f3f4f6; font-family: Arial, sans-serif;", inner),
    )
