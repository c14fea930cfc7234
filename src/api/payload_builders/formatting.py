"""Formatação compartilhada pelos renderizadores de mensagens (fr-FR)."""

from __future__ import annotations

import html
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.constants.orders import OrderType

FALLBACK_TIMEZONE = "Europe/Paris"
NOT_AVAILABLE = "N/A"


def format_money(minor_units: int) -> str:
    """1250 -> `12,50€`."""
    sign = "-" if minor_units < 0 else ""
    units, cents = divmod(abs(minor_units), 100)
    return f"{sign}{units},{cents:02d}€"


def format_local_time(moment: datetime | None = None, timezone: str = FALLBACK_TIMEZONE) -> str:
    """Data/hora no fuso do restaurante, ex: `19/10/2026 14:05:00`."""
    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        zone = ZoneInfo(FALLBACK_TIMEZONE)
    moment = moment or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(zone).strftime("%d/%m/%Y %H:%M:%S")


def escape(value: object) -> str:
    """Escapa valores livres (nomes, notas, opções) antes de entrar no HTML."""
    return html.escape("" if value is None else str(value), quote=True)


def or_not_available(value: str | None) -> str:
    return value if value else NOT_AVAILABLE


def order_type_label(order_type: OrderType) -> str:
    return "🚚 LIVRAISON" if order_type == OrderType.DELIVERY else "🏪 SUR PLACE"
