"""Peças comuns dos emails HTML."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.payload_builders.formatting import escape, format_money

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.order import OrderItem

ROW_CELL = "padding: 12px; border-bottom: 1px solid #e5e7eb;"


@dataclass(frozen=True)
class EmailContent:
    """Assunto e corpo HTML prontos para envio."""

    subject: str
    html: str


def document(body_style: str, inner: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="utf-8"></head>\n'
        f'<body style="{body_style}">\n{inner}\n</body>\n</html>'
    )


def item_rows(
    items: tuple[OrderItem, ...],
    render: Callable[[OrderItem], str],
) -> str:
    return "".join(render(item) for item in items)


def price_cell(item: OrderItem) -> str:
    return (
        f'<td style="{ROW_CELL} text-align: right; font-weight: 600;">'
        f"{format_money(item.line_total_minor_units)}</td>"
    )


def notes_block(notes: str | None, label: str, background: str) -> str:
    if not notes:
        return ""
    return (
        f'<div style="background: {background}; border-radius: 12px; padding: 15px; '
        f'margin-bottom: 20px;"><p style="margin: 0;">📝 <strong>{label}</strong> '
        f"{escape(notes)}</p></div>"
    )
