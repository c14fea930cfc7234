"""Use case: pedido enviado pelo site com pagamento no balcão."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from config.logging import mask_phone

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.notification import DispatchReport
    from app.domain.order import Order
    from app.domain.order_sources import DirectSubmission
    from app.services import NotificationDispatcher, OrderNormalizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectOrderResult:
    """Pedido aceito e o resultado do fan-out."""

    order: Order
    report: DispatchReport

    @property
    def order_id(self) -> str:
        return self.order.order_id


class SubmitDirectOrderUseCase:
    """Normaliza o pedido e aguarda todos os canais antes de responder.

    O resultado dos canais não altera a resposta: um pedido válido é
    sempre aceito.
    """

    def __init__(
        self,
        normalizer: OrderNormalizer,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._normalizer = normalizer
        self._dispatcher = dispatcher

    async def execute(self, payload: DirectSubmission | Mapping[str, Any]) -> DirectOrderResult:
        """Executa o fluxo completo.

        Raises:
            ValidationError: Pedido malformado (nenhum canal é acionado).
        """
        order = self._normalizer.from_direct_submission(payload)
        logger.info(
            "direct_order_accepted",
            extra={
                "order_id": order.order_id,
                "order_type": order.order_type.value,
                "item_count": len(order.items),
                "total_minor_units": order.total_amount_minor_units,
                "customer_phone": mask_phone(order.customer.phone),
            },
        )
        report = await self._dispatcher.dispatch(order)
        return DirectOrderResult(order=order, report=report)
