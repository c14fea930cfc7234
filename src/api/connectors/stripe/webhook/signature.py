"""Validação do header `Stripe-Signature` (HMAC-SHA256)."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass, field

from utils.errors import AuthenticationError

SIGNATURE_SCHEME = "v1"
DEFAULT_TOLERANCE_SECONDS = 300


@dataclass(frozen=True)
class SignatureHeader:
    """Header decomposto: timestamp e assinaturas `v1`."""

    timestamp: int
    signatures: tuple[str, ...] = field(default_factory=tuple)


def parse_signature_header(header: str | None) -> SignatureHeader:
    """Decompõe `t=<ts>,v1=<hex>[,v1=<hex>...]`.

    Raises:
        AuthenticationError: Header ausente ou malformado
    """
    if not header or not header.strip():
        raise AuthenticationError("missing_signature_header")

    timestamp: int | None = None
    signatures: list[str] = []
    for part in header.split(","):
        key, sep, value = part.strip().partition("=")
        if not sep:
            continue
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError as exc:
                raise AuthenticationError("malformed_signature_timestamp") from exc
        elif key == SIGNATURE_SCHEME and value:
            signatures.append(value)

    if timestamp is None:
        raise AuthenticationError("missing_signature_timestamp")
    if not signatures:
        raise AuthenticationError("no_signatures_for_scheme")
    return SignatureHeader(timestamp=timestamp, signatures=tuple(signatures))


def compute_signature(raw_body: bytes, timestamp: int, secret: str) -> str:
    """HMAC-SHA256(secret, "<timestamp>.<raw_body>") em hex."""
    signed_payload = str(timestamp).encode("utf-8") + b"." + raw_body
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def verify_signature(
    raw_body: bytes,
    signature_header: str | None,
    secret: str | None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    now: float | None = None,
) -> SignatureHeader:
    """Valida a assinatura em tempo constante contra cada entrada `v1`.

    Raises:
        AuthenticationError: Secret ausente, header inválido, assinatura
            divergente ou timestamp fora da tolerância
    """
    if not secret:
        raise AuthenticationError("missing_webhook_secret")

    header = parse_signature_header(signature_header)
    expected = compute_signature(raw_body, header.timestamp, secret)
    if not any(hmac.compare_digest(expected, candidate) for candidate in header.signatures):
        raise AuthenticationError("signature_mismatch")

    current = time.time() if now is None else now
    if tolerance_seconds > 0 and header.timestamp < current - tolerance_seconds:
        raise AuthenticationError("timestamp_outside_tolerance")
    return header
