"""API: camada de borda e adapters de provedores.

Responsabilidades:
- Receber requests do site e do gateway de pagamento (webhook)
- Validar assinaturas e corpos brutos
- Construir mensagens e payloads para APIs externas
- Chamar provedores (Twilio, Brevo, Stripe) com timeout limitado

Subpastas:
- connectors/: clientes HTTP/SDK por provedor
- payload_builders/: renderização de mensagens a partir do Order
- routes/: endpoints HTTP (pedidos, webhook, health)

NÃO PODE conter: regras de normalização de pedido nem orquestração do fan-out.
"""
