"""Contrato do gateway de pagamento usado pelo caminho de webhook."""

from __future__ import annotations

from typing import Any, Protocol


class PaymentGatewayProtocol(Protocol):
    """Leitura de sessões de checkout já pagas."""

    async def retrieve_session(self, session_id: str) -> dict[str, Any]:
        """Sessão completa (com line_items expandido quando disponível)."""
        ...

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]: ...
