"""Carregamento e validação das settings a partir do ambiente."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.settings import (
    BrevoSettings,
    NotifierSettings,
    RestaurantProfile,
    RestaurantProfileError,
    StripeSettings,
    TwilioSettings,
    load_restaurant_profile,
)
from config.settings.base import core as base_module
from config.settings import dispatch as dispatch_module
from config.settings import stripe as stripe_module
from config.settings import twilio as twilio_module


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGING", "staging"), ("whatever", "development")],
    )
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)
        assert base_module._load_base_from_env().environment == expected

    def test_invalid_log_level_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "loud")
        errors = base_module._load_base_from_env().validate()
        assert errors == ["LOG_LEVEL inválido: LOUD"]


class TestTwilioSettings:
    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC999")
        monkeypatch.setenv("TWILIO_AUTH_TOKEN", "secret")
        monkeypatch.setenv("TWILIO_WHATSAPP_FROM", "whatsapp:+14155238886")
        monkeypatch.setenv("RESTAURANT_WHATSAPP_NUMBER", "whatsapp:+33767469502")

        settings = twilio_module._load_from_env()

        assert settings.is_configured
        assert settings.messages_endpoint == (
            "https://api.twilio.com/2010-04-01/Accounts/AC999/Messages.json"
        )

    def test_partial_credentials_are_not_configured(self) -> None:
        settings = TwilioSettings(account_sid="AC1", auth_token="x")

        assert not settings.is_configured
        assert "TWILIO_WHATSAPP_FROM não configurado" in settings.validate()


class TestStripeSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("STRIPE_WEBHOOK_TOLERANCE_SECONDS", "DELIVERY_FEE_LABEL"):
            monkeypatch.delenv(name, raising=False)

        settings = stripe_module._load_from_env()

        assert settings.webhook_tolerance_seconds == 300
        assert settings.delivery_fee_label == "Livraison à domicile"

    def test_negative_tolerance_is_invalid(self) -> None:
        settings = StripeSettings(secret_key="sk", webhook_secret="whsec", webhook_tolerance_seconds=-1)
        assert settings.validate() == ["STRIPE_WEBHOOK_TOLERANCE_SECONDS deve ser >= 0"]


def test_dispatch_timeout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOTIFY_CHANNEL_TIMEOUT_SECONDS", "0")

    settings = dispatch_module._load_from_env()

    assert settings.validate() == ["NOTIFY_CHANNEL_TIMEOUT_SECONDS deve ser > 0"]


def test_configured_channels_follow_credentials() -> None:
    settings = NotifierSettings(brevo=BrevoSettings(api_key="xkeysib"))

    assert settings.configured_channels == ("customer_email", "operator_email")
    assert NotifierSettings().configured_channels == ()


def test_validate_prefixes_errors_with_domain() -> None:
    errors = NotifierSettings().validate()

    assert "stripe: STRIPE_WEBHOOK_SECRET não configurado" in errors
    assert "twilio: TWILIO_ACCOUNT_SID não configurado" in errors
    assert "brevo: BREVO_API_KEY não configurado" in errors


class TestRestaurantProfile:
    def test_bundled_profile(self) -> None:
        profile = load_restaurant_profile()

        assert profile.name == "DWICH62"
        assert profile.timezone == "Europe/Paris"
        assert profile.delivery_eta_minutes == "30-45"

    def test_unknown_keys_are_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("name: Chez Test\nphone: \"0102030405\"\nlocale: fr-FR\n", encoding="utf-8")

        profile = load_restaurant_profile(path)

        assert profile.name == "Chez Test"
        assert profile.phone == "0102030405"

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        assert load_restaurant_profile(tmp_path / "missing.yaml") == RestaurantProfile()

    def test_non_mapping_yaml_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(RestaurantProfileError):
            load_restaurant_profile(path)
