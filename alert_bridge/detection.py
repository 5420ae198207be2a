from enum import Enum

from .constants import SEVERITY_LEVELS, HIGH_SEVERITY_MESSAGES, MEDIUM_SEVERITY_MESSAGES


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def classify_by_keyword(text, high_keywords=None, medium_keywords=None):
    """Classifica uma mensagem do SNS por palavras-chave.

    Todas as palavras de alta severidade são verificadas antes das de média.
    A comparação é por substring e diferencia maiúsculas/minúsculas.
    """
    if high_keywords is None:
        high_keywords = HIGH_SEVERITY_MESSAGES
    if medium_keywords is None:
        medium_keywords = MEDIUM_SEVERITY_MESSAGES

    text = text or ""
    if any(keyword in text for keyword in high_keywords):
        return Severity.HIGH
    if any(keyword in text for keyword in medium_keywords):
        return Severity.MEDIUM
    return Severity.LOW


def classify_by_score(score):
    # https://docs.aws.amazon.com/guardduty/latest/ug/guardduty_findings.html#guardduty_findings-severity
    # Valores entre as faixas (ex.: 6.95, 8.95) caem em LOW
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return Severity.LOW

    if 7.0 <= score <= 8.9:
        return Severity.HIGH
    if 4.0 <= score <= 6.9:
        return Severity.MEDIUM
    return Severity.LOW


def get_severity_config(severity):
    return SEVERITY_LEVELS[severity.value]


def severity_label(severity):
    return get_severity_config(severity)["label"]


def severity_color(severity):
    return get_severity_config(severity)["color"]
