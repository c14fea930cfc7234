"""Cliente da Twilio Messages API para WhatsApp.

Envio de texto simples ao número do restaurante:
- POST form-urlencoded `From`/`To`/`Body`
- Basic auth `account_sid:auth_token`
- Código 63016 (duplicado) é tratado como entregue
- Logging sem números de telefone nem conteúdo da mensagem
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError, response_json
from api.connectors.twilio.errors import parse_twilio_error
from app.constants.orders import ChannelName
from utils.errors import DeliveryError

if TYPE_CHECKING:
    import httpx

    from config.settings import TwilioSettings

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwilioSendResult:
    """Resultado de um envio aceito pela Twilio."""

    message_sid: str | None
    already_delivered: bool = False


class TwilioWhatsAppClient(HttpClient):
    """Cliente HTTP especializado para a Twilio."""

    def __init__(
        self,
        settings: TwilioSettings,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds))
        self._settings = settings

    async def send_text(self, body: str) -> TwilioSendResult:
        """Envia uma mensagem de texto ao número do restaurante.

        Args:
            body: Texto da mensagem

        Raises:
            ValueError: Se as credenciais não estiverem configuradas
            DeliveryError: Resposta não-2xx (exceto duplicado) ou erro de transporte
        """
        settings = self._settings
        if not settings.is_configured:
            raise ValueError(
                "Twilio não configurado. Verifique TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, "
                "TWILIO_WHATSAPP_FROM e RESTAURANT_WHATSAPP_NUMBER."
            )

        try:
            response = await self.post(
                settings.messages_endpoint,
                data={
                    "From": settings.whatsapp_from,
                    "To": settings.operator_number,
                    "Body": body,
                },
                auth=(settings.account_sid, settings.auth_token),
            )
        except HttpError as exc:
            raise DeliveryError(str(exc), channel=ChannelName.WHATSAPP) from exc

        return self._process_response(response)

    @staticmethod
    def _process_response(response: httpx.Response) -> TwilioSendResult:
        payload = response_json(response)
        if response.is_success:
            logger.debug("twilio_message_accepted", extra={"status_code": response.status_code})
            return TwilioSendResult(message_sid=payload.get("sid"))

        error = parse_twilio_error(response.status_code, payload)
        if error.is_already_delivered:
            logger.info(
                "twilio_message_already_delivered",
                extra={"status_code": error.status_code, "error_code": error.error_code},
            )
            return TwilioSendResult(message_sid=payload.get("sid"), already_delivered=True)

        logger.warning(
            "Erro da API Twilio",
            extra={"status_code": error.status_code, "error_code": error.error_code},
        )
        raise DeliveryError(
            f"Twilio API error {error.status_code} ({error.error_code}): {error.error_message}",
            channel=ChannelName.WHATSAPP,
            status_code=error.status_code,
            provider_code=error.error_code,
        )


def create_twilio_client(
    settings: TwilioSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TwilioWhatsAppClient:
    """Factory para criar cliente Twilio com config padrão.

    Args:
        settings: TwilioSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx alternativo (testes).
    """
    from config.settings import get_twilio_settings

    twilio = settings or get_twilio_settings()
    config = HttpClientConfig(
        timeout_seconds=twilio.request_timeout_seconds,
        transport=transport,
    )
    return TwilioWhatsAppClient(twilio, config=config)
