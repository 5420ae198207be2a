import logging

from flask import Flask, request

from .constants import configure_logging, missing_settings
from .errors import DeliveryError, MalformedEnvelope, ParseError
from .handler import process_envelope

logger = logging.getLogger(__name__)


def create_app():
    configure_logging()
    missing = missing_settings()
    if missing:
        logger.warning(f"Configuração ausente: {', '.join(missing)}")

    app = Flask(__name__)

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'sns-slack-bridge'}, 200

    @app.route('/alert', methods=['POST'])
    def alert():
        data = request.get_json(silent=True)
        logger.debug(f"Received data: {data}")

        try:
            payload = process_envelope(data)
        except (MalformedEnvelope, ParseError) as e:
            logger.warning(f"Envelope rejeitado: {e}")
            return {'error': type(e).__name__, 'detail': str(e)}, 400
        except DeliveryError as e:
            logger.error(f"Falha na entrega ao Slack: {e}")
            return {'error': type(e).__name__, 'detail': str(e)}, 502

        return payload, 200

    return app
