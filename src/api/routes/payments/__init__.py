"""Rotas do gateway de pagamento."""
