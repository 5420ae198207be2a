import logging

from .constants import configure_logging, missing_settings
from .formatters import render
from .normalizer import normalize, to_json
from .services import send_slack_payload

logger = logging.getLogger(__name__)


def process_envelope(envelope, deliver=None, channel=None, account=None):
    """Normaliza, renderiza e entrega um envelope do SNS.

    Retorna o payload enviado ao Slack. Erros de formato, parse ou entrega
    são propagados para quem chamou.
    """
    logger.info(to_json(envelope))

    event = normalize(envelope, account=account)
    logger.info(f"{event.source.value} {event.title} {event.description}")

    payload = render(event, channel=channel).to_payload()
    if deliver is None:
        deliver = send_slack_payload
    deliver(payload)
    return payload


def lambda_handler(event, context):
    configure_logging()
    missing = missing_settings()
    if missing:
        logger.warning(f"Configuração ausente: {', '.join(missing)}")

    try:
        return process_envelope(event)
    except Exception as exc:
        logger.error(f"Falha ao processar evento: {exc}")
        raise
