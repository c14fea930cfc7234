"""Cliente da API transacional Brevo (`POST /smtp/email`).

Usado pelos dois canais de email; cada chamada envia um único email HTML.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError, response_json
from utils.errors import DeliveryError

if TYPE_CHECKING:
    import httpx

    from config.settings import BrevoSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailMessage:
    """Email a ser enviado (um destinatário)."""

    to_email: str
    subject: str
    html_content: str
    to_name: str = ""

    def to_payload(self, sender_email: str, sender_name: str) -> dict[str, Any]:
        recipient: dict[str, str] = {"email": self.to_email}
        if self.to_name:
            recipient["name"] = self.to_name
        return {
            "sender": {"name": sender_name, "email": sender_email},
            "to": [recipient],
            "subject": self.subject,
            "htmlContent": self.html_content,
        }


class BrevoEmailClient(HttpClient):
    """Cliente HTTP para emails transacionais."""

    def __init__(
        self,
        settings: BrevoSettings,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds))
        self._settings = settings

    async def send(self, message: EmailMessage, *, channel: str = "email") -> str | None:
        """Envia o email e retorna o `messageId` da Brevo.

        Args:
            message: Email a enviar
            channel: Canal de origem, propagado no DeliveryError

        Raises:
            ValueError: Se a API key ou remetente não estiverem configurados
            DeliveryError: Resposta não-2xx ou erro de transporte
        """
        settings = self._settings
        if not settings.is_configured:
            raise ValueError("Brevo não configurado. Verifique BREVO_API_KEY e BREVO_SENDER_EMAIL.")

        try:
            response = await self.post(
                settings.send_email_endpoint,
                json=message.to_payload(settings.sender_email, settings.sender_name),
                headers={
                    "accept": "application/json",
                    "api-key": settings.api_key,
                },
            )
        except HttpError as exc:
            raise DeliveryError(str(exc), channel=channel) from exc

        payload = response_json(response)
        if not response.is_success:
            logger.warning(
                "Erro da API Brevo",
                extra={"status_code": response.status_code, "brevo_code": payload.get("code")},
            )
            raise DeliveryError(
                f"Brevo API error {response.status_code}: {payload.get('message', 'unknown')}",
                channel=channel,
                status_code=response.status_code,
            )

        logger.debug("brevo_email_accepted", extra={"status_code": response.status_code})
        return payload.get("messageId")


def create_brevo_client(
    settings: BrevoSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BrevoEmailClient:
    """Factory para criar cliente Brevo com config padrão."""
    from config.settings import get_brevo_settings

    brevo = settings or get_brevo_settings()
    config = HttpClientConfig(
        timeout_seconds=brevo.request_timeout_seconds,
        transport=transport,
    )
    return BrevoEmailClient(brevo, config=config)
