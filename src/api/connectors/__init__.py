"""Connectors por provedor: adapters de borda para APIs externas.

Estrutura:
- twilio/: mensagens WhatsApp para o restaurante
- brevo/: emails transacionais (cliente e restaurante)
- stripe/: webhook assinado e consulta de sessões de checkout

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
