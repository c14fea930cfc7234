"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="order_notifier")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("order_accepted", extra={"order_type": "pickup"})

Campos obrigatórios em todo log:
- correlation_id
- order_id
- service
- level
- logger
- message
- asctime

Email e telefone de clientes só aparecem mascarados (ver config.logging.pii).
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import RequestContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)
from config.logging.pii import mask_email, mask_phone

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_email",
    "mask_phone",
]
