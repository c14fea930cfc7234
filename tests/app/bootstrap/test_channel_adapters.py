"""Adapters de canal contra provedores simulados com httpx.MockTransport."""

from __future__ import annotations

import json
from dataclasses import replace
from urllib.parse import parse_qs

import httpx
import pytest

from api.connectors.twilio import create_twilio_client
from app.bootstrap.channel_adapters import (
    CustomerEmailAdapter,
    OperatorEmailAdapter,
    WhatsAppOrderAdapter,
)
from app.bootstrap.dependencies import create_channel_adapters
from app.constants.orders import OutcomeStatus
from app.domain.order import Order
from config.settings import NotifierSettings, TwilioSettings
from tests.fakes.orders import build_order


class ProviderStub:
    """Responde sempre o mesmo status/corpo e guarda as requisições."""

    def __init__(self, status_code: int = 201, body: dict | None = None) -> None:
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def _adapters(settings: NotifierSettings, stub: ProviderStub) -> dict[str, object]:
    return {adapter.name: adapter for adapter in create_channel_adapters(settings, stub.transport)}


@pytest.mark.asyncio
async def test_whatsapp_posts_form_with_basic_auth(
    notifier_settings: NotifierSettings, pickup_order: Order
) -> None:
    stub = ProviderStub(201, {"sid": "SM123"})
    adapter = _adapters(notifier_settings, stub)["whatsapp"]

    outcome = await adapter.send(pickup_order)

    assert outcome.status == OutcomeStatus.DELIVERED
    request = stub.requests[0]
    assert request.url.path == "/2010-04-01/Accounts/AC123/Messages.json"
    assert request.headers["authorization"].startswith("Basic ")
    form = parse_qs(request.content.decode("utf-8"))
    assert form["From"] == ["whatsapp:+14155238886"]
    assert form["To"] == ["whatsapp:+33600000000"]
    assert "#ABCD1234" in form["Body"][0]


@pytest.mark.asyncio
async def test_whatsapp_duplicate_code_counts_as_delivered(
    notifier_settings: NotifierSettings, pickup_order: Order
) -> None:
    stub = ProviderStub(400, {"code": 63016, "message": "already delivered"})
    adapter = _adapters(notifier_settings, stub)["whatsapp"]

    outcome = await adapter.send(pickup_order)

    assert outcome.status == OutcomeStatus.DELIVERED
    assert outcome.detail == "already_delivered"


@pytest.mark.asyncio
async def test_whatsapp_other_errors_fail(notifier_settings: NotifierSettings, pickup_order: Order) -> None:
    stub = ProviderStub(401, {"code": 20003, "message": "Authenticate"})
    adapter = _adapters(notifier_settings, stub)["whatsapp"]

    outcome = await adapter.send(pickup_order)

    assert outcome.status == OutcomeStatus.FAILED
    assert "20003" in (outcome.detail or "")


@pytest.mark.asyncio
async def test_whatsapp_without_credentials_is_skipped(
    notifier_settings: NotifierSettings, pickup_order: Order
) -> None:
    settings = replace(notifier_settings, twilio=TwilioSettings())
    stub = ProviderStub()
    adapter = WhatsAppOrderAdapter(
        settings.twilio,
        settings.restaurant,
        client=create_twilio_client(settings.twilio, transport=stub.transport),
    )

    outcome = await adapter.send(pickup_order)

    assert outcome.status == OutcomeStatus.SKIPPED
    assert stub.requests == []


@pytest.mark.asyncio
async def test_whatsapp_transport_error_fails(notifier_settings: NotifierSettings, pickup_order: Order) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapters = create_channel_adapters(notifier_settings, httpx.MockTransport(_refuse))

    outcome = await adapters[0].send(pickup_order)

    assert outcome.status == OutcomeStatus.FAILED


@pytest.mark.asyncio
async def test_customer_email_sends_confirmation(
    notifier_settings: NotifierSettings, pickup_order: Order
) -> None:
    stub = ProviderStub(201, {"messageId": "<abc@smtp-relay>"})
    adapter = _adapters(notifier_settings, stub)["customer_email"]

    outcome = await adapter.send(pickup_order)

    assert outcome.status == OutcomeStatus.DELIVERED
    request = stub.requests[0]
    assert request.url.path == "/v3/smtp/email"
    assert request.headers["api-key"] == "xkeysib-test"
    body = json.loads(request.content)
    assert body["to"] == [{"email": "alice@example.com", "name": "Alice Martin"}]
    assert body["sender"]["email"] == "orders@dwich62.fr"
    assert body["subject"].startswith("✅ Commande #ABCD1234")


@pytest.mark.asyncio
async def test_customer_email_without_address_is_skipped(notifier_settings: NotifierSettings) -> None:
    stub = ProviderStub()
    adapter = _adapters(notifier_settings, stub)["customer_email"]

    outcome = await adapter.send(build_order(email=None))

    assert outcome.status == OutcomeStatus.SKIPPED
    assert outcome.detail == "no_customer_email"
    assert stub.requests == []


@pytest.mark.asyncio
async def test_customer_email_provider_error_fails(
    notifier_settings: NotifierSettings, pickup_order: Order
) -> None:
    stub = ProviderStub(400, {"code": "invalid_parameter", "message": "email is not valid"})
    adapter = _adapters(notifier_settings, stub)["customer_email"]

    outcome = await adapter.send(pickup_order)

    assert outcome.status == OutcomeStatus.FAILED
    assert "400" in (outcome.detail or "")


@pytest.mark.asyncio
async def test_operator_email_goes_to_restaurant_mailbox(
    notifier_settings: NotifierSettings, delivery_order: Order
) -> None:
    stub = ProviderStub(201, {"messageId": "<def@smtp-relay>"})
    adapter = _adapters(notifier_settings, stub)["operator_email"]

    outcome = await adapter.send(delivery_order)

    assert outcome.status == OutcomeStatus.DELIVERED
    body = json.loads(stub.requests[0].content)
    assert body["to"][0]["email"] == "kitchen@dwich62.fr"
    assert body["subject"] == "🚨 COMMANDE #ABCD1234 - 24,00€ - LIVRAISON"


@pytest.mark.asyncio
async def test_email_channels_skip_without_brevo_key(
    notifier_settings: NotifierSettings, pickup_order: Order
) -> None:
    brevo = replace(notifier_settings.brevo, api_key="")

    customer = await CustomerEmailAdapter(brevo, notifier_settings.restaurant).send(pickup_order)
    operator = await OperatorEmailAdapter(brevo, notifier_settings.restaurant).send(pickup_order)

    assert customer.status == OutcomeStatus.SKIPPED
    assert operator.status == OutcomeStatus.SKIPPED
