"""Endpoints de pedido usados pelo site.

Endpoints:
- POST /api/create-pickup-order: pedido com pagamento no balcão
- GET /api/get-checkout-session: dados de uma sessão paga (página do ticket)

Fluxo do POST:
1. Normaliza o corpo em Order (400 se inválido, nenhum canal acionado)
2. Aguarda o fan-out nos três canais
3. Responde 200 com o número do pedido, qualquer que seja o resultado dos canais
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from utils.errors import PaymentGatewayError, ValidationError

if TYPE_CHECKING:
    from app.protocols import PaymentGatewayProtocol
    from app.use_cases.orders import SubmitDirectOrderUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_submit_use_case() -> SubmitDirectOrderUseCase:
    """Obtém o use case de pedido de balcão (lazy-loading)."""
    from app.bootstrap import get_submit_direct_order_use_case

    return get_submit_direct_order_use_case()


def _get_payment_gateway() -> PaymentGatewayProtocol:
    from app.bootstrap import get_payment_gateway

    return get_payment_gateway()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


@router.post("/create-pickup-order", response_model=None)
async def create_pickup_order(request: Request) -> JSONResponse | dict[str, Any]:
    """Recebe o pedido do site e notifica restaurante e cliente.

    Returns:
        `{success, orderId}` (200), `{error}` (400 validação, 500 inesperado).
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        try:
            payload = json.loads(await request.body() or b"null")
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error("invalid JSON body", status.HTTP_400_BAD_REQUEST)
        if not isinstance(payload, dict):
            return _error("request body must be a JSON object", status.HTTP_400_BAD_REQUEST)

        try:
            result = await _get_submit_use_case().execute(payload)
        except ValidationError as exc:
            logger.info(
                "direct_order_rejected",
                extra={"correlation_id": get_correlation_id(), "field": exc.field, "error": str(exc)},
            )
            return _error(str(exc), status.HTTP_400_BAD_REQUEST)
        except Exception:
            logger.exception("direct_order_failed", extra={"correlation_id": get_correlation_id()})
            return _error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

        return {"success": True, "orderId": result.order_id}
    finally:
        reset_correlation_id(token)


@router.get("/get-checkout-session", response_model=None)
async def get_checkout_session(request: Request) -> JSONResponse | dict[str, Any]:
    """Resumo de uma sessão de checkout para a página de confirmação."""
    session_id = request.query_params.get("session_id", "").strip()
    if not session_id:
        return _error("session_id is required", status.HTTP_400_BAD_REQUEST)

    try:
        session = await _get_payment_gateway().retrieve_session(session_id)
    except PaymentGatewayError as exc:
        logger.warning("checkout_session_lookup_failed", extra={"error": str(exc)})
        return _error(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return {
        "id": session.get("id"),
        "amount_total": session.get("amount_total"),
        "customer_email": session.get("customer_email"),
        "payment_status": session.get("payment_status"),
        "metadata": session.get("metadata") or {},
    }
