class BridgeError(Exception):
    """Erro base do bridge SNS -> Slack."""


class MalformedEnvelope(BridgeError):
    """Envelope sem o formato mínimo esperado (Records/Sns/Message)."""


class ParseError(BridgeError):
    """Mensagem aninhada do SNS não é um JSON válido."""


class DeliveryError(BridgeError):
    """Falha ao entregar o payload no webhook do Slack."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
