"""Normalizador de pedidos: DirectSubmission | PaymentSessionSource -> Order.

Centraliza a união dos dois formatos de entrada para que adapters e
dispatcher operem apenas sobre o Order canônico.

Regras principais:
- Balcão: itens não vazios, quantidades > 0, endereço completo para delivery,
  pagamento padrão `on_site`.
- Gateway: `metadata.itemsJson` tem prioridade (traz as opções de cada item);
  se ausente, ilegível ou incoerente com o total pago, usa os line items sem
  a linha sintética de taxa de entrega. Pagamento sempre `card`.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.constants.orders import OrderType, PaymentMethod
from app.domain.order import CustomerInfo, Order, OrderItem
from app.domain.order_id import generate_order_id, order_id_from_session
from app.domain.order_sources import (
    CheckoutSession,
    DirectSubmission,
    MetadataItem,
    OrderSource,
    PaymentSessionSource,
    SessionLineItem,
)
from config.logging import log_fallback
from config.settings.stripe import DEFAULT_DELIVERY_FEE_LABEL
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

logger = logging.getLogger(__name__)

_ORDER_SOURCE_ADAPTER: TypeAdapter[OrderSource] = TypeAdapter(OrderSource)
_METADATA_ITEMS_ADAPTER: TypeAdapter[list[MetadataItem]] = TypeAdapter(list[MetadataItem])

# "12 rue X, 62800 Liévin" -> rua / código postal / cidade
_FRENCH_ADDRESS = re.compile(r"^(?P<street>.+?)[,\s]+(?P<postal>\d{5})\s+(?P<city>.+)$")


def _first_error(exc: PydanticValidationError) -> tuple[str, str | None]:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return (f"{location}: {message}" if location else message), (location or None)


def _validation_error(exc: PydanticValidationError) -> ValidationError:
    message, field = _first_error(exc)
    return ValidationError(message, field=field)


def _split_name(full_name: str) -> tuple[str, str]:
    parts = full_name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def _split_address(address: str) -> tuple[str, str | None, str | None]:
    match = _FRENCH_ADDRESS.match(address.strip())
    if not match:
        return address.strip(), None, None
    return match.group("street").strip(), match.group("postal"), match.group("city").strip()


class OrderNormalizer:
    """Converte qualquer OrderSource em Order.

    Args:
        delivery_fee_label: Descrição da linha sintética de entrega nos
            line items do gateway.
        id_generator: Gerador de order id para o caminho de balcão.
    """

    def __init__(
        self,
        *,
        delivery_fee_label: str = DEFAULT_DELIVERY_FEE_LABEL,
        id_generator: Callable[[], str] = generate_order_id,
    ) -> None:
        self._delivery_fee_label = delivery_fee_label.strip().casefold()
        self._generate_id = id_generator

    def normalize(self, source: OrderSource | Mapping[str, Any]) -> Order:
        """Normaliza uma entrada já tipada (ou um dict com `kind`).

        Raises:
            ValidationError: Se não for possível construir um Order válido.
        """
        if not isinstance(source, (DirectSubmission, PaymentSessionSource)):
            try:
                source = _ORDER_SOURCE_ADAPTER.validate_python(source)
            except PydanticValidationError as exc:
                raise _validation_error(exc) from exc

        if isinstance(source, DirectSubmission):
            return self.from_direct_submission(source)
        return self.from_payment_session(source.session, source.line_items)

    # ──────────────────────────────────────────────────────────────────
    # Balcão
    # ──────────────────────────────────────────────────────────────────

    def from_direct_submission(self, payload: DirectSubmission | Mapping[str, Any]) -> Order:
        """Constrói Order a partir do corpo enviado pelo site.

        Raises:
            ValidationError: Itens vazios, quantidade <= 0, endereço de
                entrega incompleto ou total incoerente.
        """
        submission = self._parse_submission(payload)

        if not submission.items:
            raise ValidationError("items must not be empty", field="items")

        for index, item in enumerate(submission.items):
            if item.quantity <= 0:
                raise ValidationError(
                    f"items.{index}.quantity must be greater than 0",
                    field=f"items.{index}.quantity",
                )
            if item.unit_price_minor_units < 0:
                raise ValidationError(
                    f"items.{index}.unitPrice must not be negative",
                    field=f"items.{index}.unitPrice",
                )

        info = submission.customer_info
        if submission.order_type == OrderType.DELIVERY:
            missing = [
                name
                for name, value in (
                    ("address", info.address),
                    ("postalCode", info.postal_code),
                    ("city", info.city),
                )
                if not value
            ]
            if missing:
                raise ValidationError(
                    f"delivery orders require {', '.join(missing)}",
                    field=f"customerInfo.{missing[0]}",
                )

        try:
            items = tuple(
                OrderItem(
                    name=item.name,
                    description=item.description,
                    quantity=item.quantity,
                    unit_price_minor_units=item.unit_price_minor_units,
                )
                for item in submission.items
            )
        except PydanticValidationError as exc:
            raise _validation_error(exc) from exc
        subtotal = sum(item.line_total_minor_units for item in items)
        total = submission.total_amount if submission.total_amount is not None else subtotal

        customer = CustomerInfo(
            first_name=info.first_name,
            last_name=info.last_name,
            phone=info.phone,
            email=info.email,
            address=info.address,
            postal_code=info.postal_code,
            city=info.city,
        )
        return self._build_order(
            order_id=self._generate_id(),
            items=items,
            customer=customer,
            order_type=submission.order_type,
            payment_method=submission.payment_method or PaymentMethod.ON_SITE,
            total=total,
            notes=submission.notes or info.notes,
        )

    @staticmethod
    def _parse_submission(payload: DirectSubmission | Mapping[str, Any]) -> DirectSubmission:
        if isinstance(payload, DirectSubmission):
            return payload
        try:
            return DirectSubmission.model_validate(payload)
        except PydanticValidationError as exc:
            raise _validation_error(exc) from exc

    # ──────────────────────────────────────────────────────────────────
    # Gateway de pagamento
    # ──────────────────────────────────────────────────────────────────

    def from_payment_session(
        self,
        session: CheckoutSession | Mapping[str, Any],
        line_items: Sequence[SessionLineItem | Mapping[str, Any]] = (),
    ) -> Order:
        """Constrói Order a partir de uma sessão de checkout paga.

        Raises:
            ValidationError: Sem fonte de itens utilizável, ou pedido delivery
                sem email/endereço resolvível.
        """
        try:
            checkout = (
                session
                if isinstance(session, CheckoutSession)
                else CheckoutSession.model_validate(session)
            )
            lines = [
                line if isinstance(line, SessionLineItem) else SessionLineItem.model_validate(line)
                for line in line_items
            ]
        except PydanticValidationError as exc:
            raise _validation_error(exc) from exc

        meta = checkout.metadata
        order_type = self._order_type_from_metadata(meta.get("orderType", ""))
        items, total = self._resolve_items(checkout, lines, order_type)
        if not items:
            raise ValidationError("no usable item source in payment session", field="items")

        email = self._resolve_email(checkout)
        if order_type == OrderType.DELIVERY and not email:
            raise ValidationError(
                "delivery order without resolvable customer email", field="customerEmail"
            )

        details = checkout.customer_details
        first_name, last_name = _split_name(
            meta.get("customerName") or (details.name if details and details.name else "")
        )
        address, postal_code, city = self._resolve_address(meta)

        customer = CustomerInfo(
            first_name=first_name,
            last_name=last_name,
            phone=meta.get("customerPhone") or (details.phone if details and details.phone else ""),
            email=email,
            address=address,
            postal_code=postal_code,
            city=city,
        )
        return self._build_order(
            order_id=order_id_from_session(checkout.id),
            items=items,
            customer=customer,
            order_type=order_type,
            payment_method=PaymentMethod.CARD,
            total=total,
            notes=meta.get("notes") or None,
        )

    @staticmethod
    def _order_type_from_metadata(raw: str) -> OrderType:
        try:
            return OrderType(raw.strip().lower())
        except ValueError:
            if raw:
                logger.warning("order_type_unknown", extra={"order_type": raw})
            return OrderType.PICKUP

    def _resolve_items(
        self,
        checkout: CheckoutSession,
        lines: list[SessionLineItem],
        order_type: OrderType,
    ) -> tuple[tuple[OrderItem, ...], int]:
        """Escolhe a fonte de itens e o total pago (centavos)."""
        line_total = sum(line.amount_total for line in lines)
        paid_total = checkout.amount_total

        metadata_items = self._items_from_metadata(checkout.metadata.get("itemsJson"))
        if metadata_items:
            subtotal = sum(item.line_total_minor_units for item in metadata_items)
            total = paid_total if paid_total is not None else (line_total or subtotal)
            if subtotal == total or (subtotal < total and order_type == OrderType.DELIVERY):
                return metadata_items, total
            log_fallback(
                logger,
                "order_items",
                reason="items_json_inconsistent_with_total",
                session_id=checkout.id,
            )

        total = paid_total if paid_total is not None else line_total
        return self._items_from_line_items(lines), total

    def _items_from_metadata(self, raw: str | None) -> tuple[OrderItem, ...]:
        if not raw:
            log_fallback(logger, "order_items", reason="items_json_missing")
            return ()
        try:
            parsed = _METADATA_ITEMS_ADAPTER.validate_python(json.loads(raw))
            return tuple(
                OrderItem(
                    name=item.name,
                    description=item.options,
                    quantity=item.qty,
                    unit_price_minor_units=item.price,
                )
                for item in parsed
            )
        except (json.JSONDecodeError, PydanticValidationError):
            log_fallback(logger, "order_items", reason="items_json_unparsable")
            return ()

    def is_delivery_fee_line(self, line: SessionLineItem) -> bool:
        """True para a linha sintética de taxa de entrega."""
        return line.description.strip().casefold() == self._delivery_fee_label

    def _items_from_line_items(self, lines: list[SessionLineItem]) -> tuple[OrderItem, ...]:
        items: list[OrderItem] = []
        for line in lines:
            if self.is_delivery_fee_line(line) or line.quantity <= 0:
                continue
            name = line.description or "Article"
            amount = max(line.amount_total, 0)
            quantity = line.quantity
            if amount % quantity:
                # Desconto não divisível: uma linha única com o valor exato pago
                name, quantity = f"{quantity}x {name}", 1
            items.append(
                OrderItem(
                    name=name,
                    quantity=quantity,
                    unit_price_minor_units=amount // quantity,
                )
            )
        return tuple(items)

    @staticmethod
    def _resolve_email(checkout: CheckoutSession) -> str | None:
        details = checkout.customer_details
        return (
            checkout.customer_email
            or (details.email if details else None)
            or checkout.metadata.get("customerEmail")
            or None
        )

    @staticmethod
    def _resolve_address(meta: Mapping[str, str]) -> tuple[str | None, str | None, str | None]:
        raw_address = meta.get("customerAddress", "").strip()
        postal_code = meta.get("customerPostalCode", "").strip() or None
        city = meta.get("customerCity", "").strip() or None
        if not raw_address:
            return None, postal_code, city
        if postal_code and city:
            return raw_address, postal_code, city

        street, parsed_postal, parsed_city = _split_address(raw_address)
        return street, postal_code or parsed_postal, city or parsed_city

    # ──────────────────────────────────────────────────────────────────

    @staticmethod
    def _build_order(
        *,
        order_id: str,
        items: tuple[OrderItem, ...],
        customer: CustomerInfo,
        order_type: OrderType,
        payment_method: PaymentMethod,
        total: int,
        notes: str | None,
    ) -> Order:
        try:
            return Order(
                order_id=order_id,
                items=items,
                customer=customer,
                order_type=order_type,
                payment_method=payment_method,
                total_amount_minor_units=total,
                notes=notes,
            )
        except PydanticValidationError as exc:
            raise _validation_error(exc) from exc
