"""Rotas de pedidos (site)."""
