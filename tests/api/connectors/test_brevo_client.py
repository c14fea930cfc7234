"""Cliente Brevo (email transacional)."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.brevo import EmailMessage, create_brevo_client
from config.settings import BrevoSettings
from utils.errors import DeliveryError

SETTINGS = BrevoSettings(api_key="xkeysib-test", sender_email="orders@dwich62.fr", sender_name="DWICH62")


def test_payload_omits_empty_recipient_name() -> None:
    message = EmailMessage(to_email="a@b.fr", subject="Oi", html_content="<p>x</p>")

    payload = message.to_payload("orders@dwich62.fr", "DWICH62")

    assert payload == {
        "sender": {"email": "orders@dwich62.fr", "name": "DWICH62"},
        "to": [{"email": "a@b.fr"}],
        "subject": "Oi",
        "htmlContent": "<p>x</p>",
    }


@pytest.mark.asyncio
async def test_send_returns_message_id() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"messageId": "<201@smtp-relay.mailin.fr>"})

    client = create_brevo_client(SETTINGS, transport=httpx.MockTransport(handler))
    message_id = await client.send(
        EmailMessage(to_email="a@b.fr", to_name="A B", subject="Oi", html_content="<p>x</p>"),
        channel="customer_email",
    )

    assert message_id == "<201@smtp-relay.mailin.fr>"
    assert str(seen[0].url) == "https://api.brevo.com/v3/smtp/email"
    assert seen[0].headers["accept"] == "application/json"
    assert json.loads(seen[0].content)["to"] == [{"email": "a@b.fr", "name": "A B"}]


@pytest.mark.asyncio
async def test_rejected_email_raises_delivery_error_for_channel() -> None:
    client = create_brevo_client(
        SETTINGS,
        transport=httpx.MockTransport(
            lambda request: httpx.Response(401, json={"code": "unauthorized", "message": "Key not found"})
        ),
    )

    with pytest.raises(DeliveryError) as exc_info:
        await client.send(
            EmailMessage(to_email="a@b.fr", subject="Oi", html_content="x"),
            channel="operator_email",
        )

    assert exc_info.value.channel == "operator_email"
    assert exc_info.value.status_code == 401
    assert "Key not found" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_error_raises_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = create_brevo_client(SETTINGS, transport=httpx.MockTransport(handler))

    with pytest.raises(DeliveryError, match="http_connection_error"):
        await client.send(EmailMessage(to_email="a@b.fr", subject="Oi", html_content="x"))
