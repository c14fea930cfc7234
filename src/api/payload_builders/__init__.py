"""Renderizadores de mensagens: funções puras de Order.

Estrutura:
- whatsapp/: texto para o restaurante
- email/: confirmação do cliente e ticket do restaurante

Nenhum renderizador faz IO; adapters chamam e enviam o resultado.
"""

__all__: list[str] = []
