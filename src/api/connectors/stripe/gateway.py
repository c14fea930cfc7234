"""Consulta de sessões de checkout no gateway de pagamento.

O SDK oficial é síncrono: cada chamada roda em thread separada e tem o
tempo limitado por `asyncio.wait_for`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import stripe

from utils.errors import PaymentGatewayError

if TYPE_CHECKING:
    from config.settings import StripeSettings

logger = logging.getLogger(__name__)

LINE_ITEMS_PAGE_LIMIT = 100


class StripeCheckoutGateway:
    """Leitura de sessões de checkout e seus line items.

    Args:
        settings: Chave secreta e timeout.
        client: StripeClient já construído (testes).
    """

    def __init__(
        self,
        settings: StripeSettings,
        client: stripe.StripeClient | None = None,
    ) -> None:
        self._timeout = settings.request_timeout_seconds
        self._client = client
        self._secret_key = settings.secret_key

    def _get_client(self) -> stripe.StripeClient:
        if self._client is None:
            if not self._secret_key:
                raise PaymentGatewayError("STRIPE_SECRET_KEY não configurado")
            self._client = stripe.StripeClient(self._secret_key, max_network_retries=0)
        return self._client

    async def retrieve_session(self, session_id: str) -> dict[str, Any]:
        """Sessão completa com `line_items` expandido.

        Raises:
            PaymentGatewayError: Erro da API, timeout ou chave ausente
        """
        client = self._get_client()
        session = await self._call(
            "retrieve_session",
            client.checkout.sessions.retrieve,
            session_id,
            params={"expand": ["line_items"]},
        )
        return session.to_dict()

    async def list_line_items(self, session_id: str) -> list[dict[str, Any]]:
        """Line items da sessão (primeira página, até 100 linhas).

        Raises:
            PaymentGatewayError: Erro da API, timeout ou chave ausente
        """
        client = self._get_client()
        page = await self._call(
            "list_line_items",
            client.checkout.sessions.line_items.list,
            session_id,
            params={"limit": LINE_ITEMS_PAGE_LIMIT},
        )
        return [item.to_dict() for item in page.data]

    async def _call(self, operation: str, func: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args, **kwargs),
                timeout=self._timeout,
            )
        except TimeoutError as exc:
            logger.warning("stripe_timeout", extra={"operation": operation})
            raise PaymentGatewayError(f"{operation}: timeout") from exc
        except stripe.StripeError as exc:
            logger.warning(
                "stripe_api_error",
                extra={
                    "operation": operation,
                    "http_status": exc.http_status,
                    "stripe_code": exc.code,
                },
            )
            raise PaymentGatewayError(f"{operation}: {exc.user_message or type(exc).__name__}") from exc

