"""Bridge de notificações SNS -> Slack.

Este pacote contém:
- constants: variáveis de ambiente, palavras-chave e mapa de severidade
- detection: classificação de severidade (palavras-chave e score)
- models: evento normalizado e mensagem de saída
- errors: hierarquia de erros
- normalizer: conversão do envelope do SNS para o evento normalizado
- formatters: renderização do evento para o webhook do Slack
- services: entrega no webhook do Slack
- handler: entrada para o AWS Lambda
- controller: criação do Flask app e endpoints
"""
