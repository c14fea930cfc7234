"""Order canônico: representação única de um pedido validado.

Independe do caminho de entrada (balcão ou webhook de pagamento): adapters
e dispatcher só conhecem este modelo. Imutável depois de construído.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.constants.orders import OrderType, PaymentMethod


def _utcnow() -> datetime:
    return datetime.now(UTC)


class OrderItem(BaseModel):
    """Linha de produto do pedido (valores em centavos)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str | None = Field(None, description="Opções escolhidas, texto livre.")
    quantity: int = Field(..., gt=0)
    unit_price_minor_units: int = Field(..., ge=0)

    @property
    def line_total_minor_units(self) -> int:
        return self.unit_price_minor_units * self.quantity


class CustomerInfo(BaseModel):
    """Dados de contato do cliente.

    Endereço só é obrigatório para entrega; a regra é aplicada em Order.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str | None = None
    address: str | None = None
    postal_code: str | None = None
    city: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def has_delivery_address(self) -> bool:
        return bool(self.address and self.postal_code and self.city)

    @property
    def delivery_address_line(self) -> str:
        if not self.has_delivery_address:
            return self.address or ""
        return f"{self.address}, {self.postal_code} {self.city}"


class Order(BaseModel):
    """Pedido canônico.

    Invariante: total >= soma das linhas. A diferença positiva é a taxa de
    entrega e só é aceita em pedidos `delivery`.
    """

    model_config = ConfigDict(frozen=True)

    order_id: str = Field(..., min_length=8, max_length=8)
    items: tuple[OrderItem, ...] = Field(..., min_length=1)
    customer: CustomerInfo
    order_type: OrderType
    payment_method: PaymentMethod
    total_amount_minor_units: int = Field(..., ge=0)
    notes: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def _check_invariants(self) -> Order:
        subtotal = self.subtotal_minor_units
        if self.total_amount_minor_units < subtotal:
            raise ValueError(
                f"total {self.total_amount_minor_units} menor que a soma dos itens {subtotal}"
            )
        if self.total_amount_minor_units > subtotal and self.order_type != OrderType.DELIVERY:
            raise ValueError("taxa de entrega só é permitida em pedidos delivery")
        if self.order_type == OrderType.DELIVERY and not self.customer.has_delivery_address:
            raise ValueError("pedido delivery exige endereço, código postal e cidade")
        return self

    @property
    def subtotal_minor_units(self) -> int:
        return sum(item.line_total_minor_units for item in self.items)

    @property
    def delivery_fee_minor_units(self) -> int:
        return self.total_amount_minor_units - self.subtotal_minor_units

    @property
    def is_paid(self) -> bool:
        """Pedido já pago online (nada a cobrar na retirada/entrega)."""
        return self.payment_method == PaymentMethod.CARD
