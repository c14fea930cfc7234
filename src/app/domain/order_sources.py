"""Entradas aceitas pelo normalizador de pedidos.

Dois produtores com formatos incompatíveis:
- DirectSubmission: corpo JSON aninhado enviado pelo site (pagamento no balcão)
- PaymentSessionSource: sessão de checkout do gateway + line items, com
  metadata plana (string -> string) e `itemsJson` opcional

`OrderSource` é a união discriminada por `kind`; nenhum consumidor recebe
dicts crus.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.constants.orders import OrderType, PaymentMethod


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class SubmittedItem(BaseModel):
    """Item como enviado pelo site."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str | None = Field(
        None, validation_alias=AliasChoices("description", "options")
    )
    quantity: int = Field(..., validation_alias=AliasChoices("quantity", "qty"))
    unit_price_minor_units: int = Field(
        ...,
        validation_alias=AliasChoices(
            "unitPriceMinorUnits", "unit_price_minor_units", "unitPrice", "price"
        ),
    )

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, value: Any) -> Any:
        return _blank_to_none(value)


class SubmittedCustomer(BaseModel):
    """Dados do cliente como enviados pelo site (camelCase ou snake_case)."""

    model_config = ConfigDict(extra="ignore")

    first_name: str = Field("", validation_alias=AliasChoices("firstName", "first_name"))
    last_name: str = Field("", validation_alias=AliasChoices("lastName", "last_name"))
    phone: str = ""
    email: str | None = None
    address: str | None = None
    postal_code: str | None = Field(
        None, validation_alias=AliasChoices("postalCode", "postal_code", "zipCode")
    )
    city: str | None = None
    notes: str | None = None

    @field_validator("email", "address", "postal_code", "city", "notes", mode="before")
    @classmethod
    def _blank_optionals(cls, value: Any) -> Any:
        return _blank_to_none(value)


class DirectSubmission(BaseModel):
    """Pedido criado diretamente pelo site, sem pagamento online."""

    model_config = ConfigDict(extra="ignore")

    kind: Literal["direct"] = "direct"
    items: list[SubmittedItem] = Field(default_factory=list)
    customer_info: SubmittedCustomer = Field(
        ..., validation_alias=AliasChoices("customerInfo", "customer_info")
    )
    order_type: OrderType = Field(
        OrderType.PICKUP, validation_alias=AliasChoices("orderType", "order_type")
    )
    payment_method: PaymentMethod | None = Field(
        None, validation_alias=AliasChoices("paymentMethod", "payment_method")
    )
    total_amount: int | None = Field(
        None, ge=0, validation_alias=AliasChoices("totalAmount", "total_amount")
    )
    notes: str | None = None

    @field_validator("notes", mode="before")
    @classmethod
    def _blank_notes(cls, value: Any) -> Any:
        return _blank_to_none(value)


class CustomerDetails(BaseModel):
    """Bloco `customer_details` da sessão de checkout."""

    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    name: str | None = None
    phone: str | None = None


class CheckoutSession(BaseModel):
    """Campos da sessão de checkout usados pelo serviço."""

    model_config = ConfigDict(extra="ignore")

    id: str
    amount_total: int | None = None
    customer_email: str | None = None
    customer_details: CustomerDetails | None = None
    payment_status: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _flatten_metadata(cls, value: Any) -> dict[str, str]:
        if not value:
            return {}
        return {str(key): "" if item is None else str(item) for key, item in dict(value).items()}


class SessionLineItem(BaseModel):
    """Line item do gateway: sem opções estruturadas.

    `amount_total` já vem com descontos aplicados e é o valor efetivamente pago.
    """

    model_config = ConfigDict(extra="ignore")

    description: str = ""
    quantity: int = 1
    amount_total: int = 0

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return value or ""


class MetadataItem(BaseModel):
    """Item serializado em `metadata.itemsJson` no momento do checkout."""

    model_config = ConfigDict(extra="ignore")

    name: str
    qty: int = Field(..., validation_alias=AliasChoices("qty", "quantity"))
    price: int = Field(..., validation_alias=AliasChoices("price", "unitPrice"))
    options: str | None = None

    @field_validator("options", mode="before")
    @classmethod
    def _blank_options(cls, value: Any) -> Any:
        return _blank_to_none(value)


class PaymentSessionSource(BaseModel):
    """Sessão de pagamento concluída + line items já buscados no gateway."""

    model_config = ConfigDict(extra="ignore")

    kind: Literal["payment_session"] = "payment_session"
    session: CheckoutSession
    line_items: list[SessionLineItem] = Field(default_factory=list)


OrderSource = Annotated[
    DirectSubmission | PaymentSessionSource,
    Field(discriminator="kind"),
]
