"""Assinatura de webhooks de teste no mesmo esquema do gateway."""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from typing import Any

from tests.fakes.orders import WEBHOOK_SECRET


def sign_payload(
    raw_body: bytes,
    secret: str = WEBHOOK_SECRET,
    timestamp: int | None = None,
) -> str:
    """Header `Stripe-Signature` válido para o corpo informado."""
    ts = int(time.time()) if timestamp is None else timestamp
    digest = hmac.new(
        secret.encode("utf-8"),
        f"{ts}.".encode() + raw_body,
        hashlib.sha256,
    ).hexdigest()
    return f"t={ts},v1={digest}"


def encode_event(envelope: dict[str, Any]) -> bytes:
    return json.dumps(envelope).encode("utf-8")
