"""Mensagens de texto para WhatsApp."""

from api.payload_builders.whatsapp.order_text import build_order_text

__all__ = ["build_order_text"]
