"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
expõe os use cases prontos para as rotas.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, get_order_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_notifier_settings

if TYPE_CHECKING:
    from app.protocols import PaymentGatewayProtocol
    from app.use_cases.orders import ProcessPaymentWebhookUseCase, SubmitDirectOrderUseCase
    from config.settings import NotifierSettings

# Domínios sem os quais o serviço não deve subir em staging/production.
# Canais sem configuração apenas viram `skipped`.
CRITICAL_SETTING_DOMAINS = ("base", "stripe", "dispatch")

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        order_id_getter=get_order_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name="order_notifier_test",
        correlation_id_getter=get_correlation_id,
        order_id_getter=get_order_id,
    )


def validate_runtime_settings(settings: NotifierSettings | None = None) -> list[str]:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido quando um domínio crítico está
    inválido. Erros de canal e qualquer erro em `development` só geram alerta.

    Returns:
        Lista de erros encontrados (vazia = tudo OK).

    Raises:
        RuntimeError: Configuração crítica inválida em ambiente estrito.
    """
    settings = settings or get_notifier_settings()
    environment = settings.base.environment
    errors = settings.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
            "configured_channels": list(settings.configured_channels),
        },
    )
    critical = [error for error in errors if error.split(":", 1)[0] in CRITICAL_SETTING_DOMAINS]
    if settings.base.is_strict and critical:
        details = "\n".join(f"- {error}" for error in critical)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
    return errors


# ──────────────────────────────────────────────────────────────────────────────
# Use case getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_submit_direct_order_use_case() -> SubmitDirectOrderUseCase:
    """Use case do pedido de balcão (singleton)."""
    from app.bootstrap.dependencies import create_submit_direct_order_use_case

    return create_submit_direct_order_use_case()


@lru_cache(maxsize=1)
def get_process_payment_webhook_use_case() -> ProcessPaymentWebhookUseCase:
    """Use case do webhook de pagamento (singleton)."""
    from app.bootstrap.dependencies import create_process_payment_webhook_use_case

    return create_process_payment_webhook_use_case()


@lru_cache(maxsize=1)
def get_payment_gateway() -> PaymentGatewayProtocol:
    """Gateway de pagamento para consultas avulsas (singleton)."""
    from app.bootstrap.dependencies import create_payment_gateway

    return create_payment_gateway()


def reset_use_cases() -> None:
    """Limpa os singletons (testes e reload de settings)."""
    get_payment_gateway.cache_clear()
    get_submit_direct_order_use_case.cache_clear()
    get_process_payment_webhook_use_case.cache_clear()
