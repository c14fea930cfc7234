"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (pedido de balcão, webhook, health)
- Validação inicial de request (headers, corpo bruto, query params)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/orders/: endpoints chamados pelo site
- routes/payments/: webhook do gateway de pagamento
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
