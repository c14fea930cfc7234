"""Health e readiness."""

from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
import api.routes.health.router as health_module
from config.settings import BrevoSettings, NotifierSettings, TwilioSettings


def _client(monkeypatch: pytest.MonkeyPatch, settings: NotifierSettings) -> TestClient:
    monkeypatch.setattr(health_module, "get_notifier_settings", lambda: settings)
    app = FastAPI()
    app.include_router(create_api_router())
    return TestClient(app)


def test_health(monkeypatch: pytest.MonkeyPatch, notifier_settings: NotifierSettings) -> None:
    response = _client(monkeypatch, notifier_settings).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "order_notifier"


def test_ready_when_channels_configured(
    monkeypatch: pytest.MonkeyPatch, notifier_settings: NotifierSettings
) -> None:
    response = _client(monkeypatch, notifier_settings).get("/ready")

    assert response.status_code == 200
    checks = response.json()["checks"]
    assert set(checks) == {"whatsapp", "customer_email", "operator_email", "payment_webhook"}
    assert all(check["status"] == "configured" for check in checks.values())


def test_ready_with_only_whatsapp(
    monkeypatch: pytest.MonkeyPatch, notifier_settings: NotifierSettings
) -> None:
    settings = replace(notifier_settings, brevo=BrevoSettings())

    response = _client(monkeypatch, settings).get("/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["customer_email"]["status"] == "not_configured"


def test_not_ready_without_any_channel(
    monkeypatch: pytest.MonkeyPatch, notifier_settings: NotifierSettings
) -> None:
    settings = replace(notifier_settings, brevo=BrevoSettings(), twilio=TwilioSettings())

    response = _client(monkeypatch, settings).get("/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"
