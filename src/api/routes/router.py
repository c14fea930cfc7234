"""Agregador de rotas: registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.orders.router import router as orders_router
from api.routes.payments.webhook import router as payments_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Pedidos do site e webhook do gateway, sob /api como no site
    api_router.include_router(orders_router, prefix="/api", tags=["orders"])
    api_router.include_router(payments_router, prefix="/api", tags=["payments"])

    return api_router
