import json
import logging

from .constants import ACCOUNT, GUARDDUTY_FINDING_TYPE
from .detection import Severity, classify_by_keyword, classify_by_score
from .errors import MalformedEnvelope, ParseError
from .models import EventSource, NormalizedEvent

logger = logging.getLogger(__name__)

UNIDENTIFIED_TITLE = "Unidentified Event Type Received"


def to_json(data):
    return json.dumps(data, indent=2, default=str)


def finding_link(region, finding_id, account=None):
    if account is None:
        account = ACCOUNT
    return (
        f"https://{region}.console.aws.amazon.com/guardduty/home?region={region}"
        f"#/findings?macros=all&fId={finding_id} (switch to {account} to see)"
    )


def extract_sns_record(envelope):
    """Retorna o bloco `Sns` do primeiro registro do envelope.

    Apenas Records[0] é considerado; os demais registros são ignorados.
    """
    if not isinstance(envelope, dict):
        raise MalformedEnvelope("Envelope deve ser um objeto JSON")

    records = envelope.get('Records')
    if not isinstance(records, list) or not records:
        raise MalformedEnvelope("Envelope sem 'Records'")

    first = records[0]
    sns = first.get('Sns') if isinstance(first, dict) else None
    if not isinstance(sns, dict):
        raise MalformedEnvelope("Records[0] sem bloco 'Sns'")

    if sns.get('Message') is None:
        raise MalformedEnvelope("Records[0].Sns sem 'Message'")
    if not isinstance(sns['Message'], str):
        raise MalformedEnvelope("Records[0].Sns.Message deve ser texto")
    if sns.get('Subject') is not None and not isinstance(sns['Subject'], str):
        raise MalformedEnvelope("Records[0].Sns.Subject deve ser texto ou null")

    if len(records) > 1:
        logger.debug(f"Envelope com {len(records)} registros; apenas o primeiro será processado")
    return sns


def parse_message(message):
    try:
        return json.loads(message)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Mensagem do SNS não é um JSON válido: {exc}") from exc


def _require(detail, key, kind):
    if key not in detail:
        raise MalformedEnvelope(f"Evento '{kind}' sem campo detail.{key}")
    if not isinstance(detail[key], str):
        raise MalformedEnvelope(f"Evento '{kind}' com detail.{key} que não é texto")
    return detail[key]


def _from_notification(subject, message):
    return NormalizedEvent(
        title=subject,
        description=message,
        severity=classify_by_keyword(message),
        source=EventSource.NOTIFICATION,
    )


def _from_guardduty_finding(event, account):
    detail = event.get('detail')
    if not isinstance(detail, dict):
        raise MalformedEnvelope("GuardDuty Finding sem objeto 'detail'")

    link = finding_link(
        _require(detail, 'region', GUARDDUTY_FINDING_TYPE),
        _require(detail, 'id', GUARDDUTY_FINDING_TYPE),
        account,
    )
    description = f"{_require(detail, 'description', GUARDDUTY_FINDING_TYPE)}\nSee this GuardDuty link for more details: {link}"
    return NormalizedEvent(
        title=_require(detail, 'title', GUARDDUTY_FINDING_TYPE),
        description=description,
        severity=classify_by_score(detail.get('severity')),
        source=EventSource.SECURITY_FINDING,
    )


def _from_api_call(event):
    detail_type = event.get('detail-type')
    if not isinstance(detail_type, str):
        raise MalformedEnvelope("Evento sem 'detail-type' textual")
    detail = event.get('detail')
    if not isinstance(detail, dict):
        raise MalformedEnvelope(f"Evento '{detail_type}' sem objeto 'detail'")

    return NormalizedEvent(
        title=detail_type,
        description=f"User performed API action of {_require(detail, 'eventName', detail_type)}",
        severity=Severity.MEDIUM,
        source=EventSource.SECURITY_FINDING_API,
    )


def _unidentified(envelope):
    return NormalizedEvent(
        title=UNIDENTIFIED_TITLE,
        description=to_json(envelope),
        severity=Severity.LOW,
        source=EventSource.UNIDENTIFIED,
    )


def normalize(envelope, account=None):
    sns = extract_sns_record(envelope)
    subject = sns.get('Subject')
    message = sns['Message']

    # 1) Notificação direta do SNS (com assunto)
    if subject is not None:
        return _from_notification(subject, message)

    # 2) Sem assunto: a mensagem carrega um evento do CloudWatch/EventBridge serializado
    event = parse_message(message)
    if isinstance(event, dict):
        if event.get('detail-type') == GUARDDUTY_FINDING_TYPE:
            return _from_guardduty_finding(event, account)
        return _from_api_call(event)

    # 3) Formato não reconhecido
    logger.warning("Evento não identificado recebido; usando fallback de baixa severidade")
    return _unidentified(envelope)
