"""App: coração do sistema: domínio, orquestração e casos de uso.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring de canais)
- domain/: Order canônico, entradas aceitas, outcomes de canal
- use_cases/: pedido de balcão e webhook de pagamento
- services/: normalizador de pedidos e dispatcher de notificações
- protocols/: contratos de adapters de canal e gateway de pagamento
- observability/: contexto de logs e métricas
- constants/: enums e constantes da aplicação

Padrão: app executa; api adapta; config configura; utils apoia.
"""
