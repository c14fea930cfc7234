"""Ticket HTML enviado à caixa operacional do restaurante."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.email._common import EmailContent, document, item_rows
from api.payload_builders.formatting import (
    escape,
    format_local_time,
    format_money,
    or_not_available,
)
from app.constants.orders import OrderType

if TYPE_CHECKING:
    from app.domain.order import Order, OrderItem
    from config.settings import RestaurantProfile

_CELL = "padding: 12px; border-bottom: 1px solid #ddd;"


def operator_subject(order: Order) -> str:
    total = format_money(order.total_amount_minor_units)
    if not order.is_paid:
        return f"🏪 SUR PLACE #{order.order_id} - {total} - À ENCAISSER"
    mode = "LIVRAISON" if order.order_type == OrderType.DELIVERY else "SUR PLACE"
    return f"🚨 COMMANDE #{order.order_id} - {total} - {mode}"


def _item_row(item: OrderItem) -> str:
    return (
        f'<tr><td style="{_CELL} font-weight: bold;">{item.quantity}x {escape(item.name)}</td>'
        f'<td style="{_CELL}">{escape(item.description or "-")}</td>'
        f'<td style="{_CELL} text-align: right;">{format_money(item.line_total_minor_units)}</td></tr>'
    )


def build_operator_email(order: Order, profile: RestaurantProfile) -> EmailContent:
    """Ticket de preparo: cliente, modo, itens com opções, total e notas."""
    customer = order.customer
    total = format_money(order.total_amount_minor_units)
    if order.is_paid:
        title, color, badge = "🚨 NOUVELLE COMMANDE", "#dc2626", "💳 PAYÉ"
        total_label = "TOTAL"
    else:
        title, color, badge = "🏪 COMMANDE SUR PLACE", "#f59e0b", "💵 À ENCAISSER"
        total_label = "TOTAL À ENCAISSER"

    if order.order_type == OrderType.DELIVERY:
        mode_block = (
            '<div style="padding: 20px; background: #fef3c7;"><h2 style="margin: 0 0 10px 0;">🚚 LIVRAISON</h2>'
            f'<p style="margin: 0; font-weight: bold;">{escape(customer.delivery_address_line)}</p></div>'
        )
    else:
        mode_block = (
            '<div style="padding: 20px; background: #dbeafe;"><h2 style="margin: 0 0 10px 0;">🏪 SUR PLACE</h2>'
            '<p style="margin: 0;">Retrait sur place</p></div>'
        )

    fee_row = ""
    if order.delivery_fee_minor_units > 0:
        fee_row = (
            '<tr><td colspan="2" style="padding: 12px; text-align: right;">Livraison:</td>'
            f'<td style="padding: 12px; text-align: right;">{format_money(order.delivery_fee_minor_units)}</td></tr>'
        )

    notes = ""
    if order.notes:
        notes = (
            '<div style="padding: 20px; background: #fef3c7;"><h3 style="margin: 0 0 10px 0;">📝 NOTES</h3>'
            f'<p style="margin: 0; font-weight: bold;">{escape(order.notes)}</p></div>'
        )

    phone = escape(customer.phone)
    inner = f"""<div style="max-width: 600px; margin: 0 auto; background: white; border-radius: 8px; overflow: hidden;">
  <div style="background: {color}; padding: 20px; text-align: center;"><h1 style="color: white; margin: 0;">{title}</h1></div>
  <div style="padding: 20px; text-align: center; border-bottom: 3px solid {color};">
    <p style="margin: 0; color: #666;">Commande</p>
    <p style="margin: 5px 0; color: {color}; font-size: 36px; font-weight: bold;">#{order.order_id}</p>
    <p style="margin: 10px 0; font-size: 24px; font-weight: bold; color: #16a34a;">{total}</p>
    <p style="margin: 0; background: #111827; color: white; display: inline-block; padding: 5px 15px; border-radius: 20px; font-weight: bold;">{badge}</p>
  </div>
  <div style="padding: 20px; background: #f9f9f9;">
    <h2 style="margin: 0 0 15px 0;">👤 CLIENT</h2>
    <p style="margin: 5px 0;"><strong>Nom:</strong> {escape(or_not_available(customer.full_name))}</p>
    <p style="margin: 5px 0;"><strong>Tél:</strong> <a href="tel:{phone}" style="color: #dc2626;">{escape(or_not_available(customer.phone))}</a></p>
    <p style="margin: 5px 0;"><strong>Email:</strong> {escape(or_not_available(customer.email))}</p>
  </div>
  {mode_block}
  <div style="padding: 20px;">
    <h2 style="margin: 0 0 15px 0;">🍔 COMMANDE</h2>
    <table style="width: 100%; border-collapse: collapse;">
      <thead><tr style="background: #f3f4f6;"><th style="padding: 12px; text-align: left;">Produit</th><th style="padding: 12px; text-align: left;">Options</th><th style="padding: 12px; text-align: right;">Prix</th></tr></thead>
      <tbody>{item_rows(order.items, _item_row)}</tbody>
      <tfoot>{fee_row}<tr style="background: {color}; color: white;"><td colspan="2" style="padding: 15px; font-size: 18px; font-weight: bold;">{total_label}</td><td style="padding: 15px; text-align: right; font-size: 24px; font-weight: bold;">{total}</td></tr></tfoot>
    </table>
  </div>
  {notes}
  <div style="padding: 15px; background: #333; text-align: center;"><p style="margin: 0; color: #999; font-size: 12px;">{format_local_time(order.created_at, profile.timezone)}</p></div>
</div>"""
    return EmailContent(
        subject=operator_subject(order),
        html=document("margin: 0; padding: 20px; background: #f5f5f5; font-family: Arial, sans-serif;", inner),
    )
