import logging

import requests

from .constants import SLACK_HOSTNAME, SLACK_PATH, SLACK_TIMEOUT_SECONDS
from .errors import DeliveryError

logger = logging.getLogger(__name__)


def webhook_url(path=None):
    if path is None:
        path = SLACK_PATH
    return f"https://{SLACK_HOSTNAME}{path}"


def send_slack_payload(payload, path=None):
    """Envia o payload para o incoming webhook do Slack (uma única tentativa)."""
    url = webhook_url(path)
    try:
        resp = requests.post(url, json=payload, timeout=SLACK_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        logger.error(f"problem with request: {exc}")
        raise DeliveryError(f"Falha ao enviar para o Slack: {exc}") from exc

    logger.debug(f"Slack response: {resp.status_code}")
    if not resp.ok:
        logger.debug(f"Response content: {resp.text}")
        raise DeliveryError(f"Slack respondeu {resp.status_code}: {resp.text}", status_code=resp.status_code)
    return resp
