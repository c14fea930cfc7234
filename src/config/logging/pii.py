"""Máscaras para dados de contato do cliente em logs."""

from __future__ import annotations


def mask_email(email: str | None) -> str:
    """`alice@example.com` -> `a***@example.com`."""
    if not email or "@" not in email:
        return ""
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"


def mask_phone(phone: str | None) -> str:
    """Mantém só os 2 últimos dígitos: `0600000042` -> `********42`."""
    if not phone:
        return ""
    digits = "".join(ch for ch in phone if ch.isdigit())
    if len(digits) <= 2:
        return "*" * len(digits)
    return "*" * (len(digits) - 2) + digits[-2:]
