import json
import logging
import os

logger = logging.getLogger(__name__)

# Configurações globais de ambiente
SLACK_CHANNEL_NAME = os.getenv("SLACK_CHANNEL_NAME", "")
SLACK_PATH = os.getenv("SLACK_PATH", "")
ACCOUNT = os.getenv("ACCOUNT", "")
SLACK_HOSTNAME = os.getenv("SLACK_HOSTNAME", "hooks.slack.com")
SLACK_TIMEOUT_SECONDS = int(os.getenv("SLACK_TIMEOUT_SECONDS", "10"))
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Identidade fixa do post no Slack
SLACK_USERNAME = "AWS Alerts"
SLACK_ICON_EMOJI = ":aws:"

GUARDDUTY_FINDING_TYPE = "GuardDuty Finding"

# Mensagens que indicam falha (ordem importa: primeira que bater vence)
DANGER_MESSAGES = (
    " but with errors",
    " to RED",
    "During an aborted deployment",
    "Failed to deploy application",
    "Failed to deploy configuration",
    "has a dependent object",
    "is not authorized to perform",
    "Pending to Degraded",
    "Stack deletion failed",
    "Unsuccessful command execution",
    "You do not have permission",
    "Your quota allows for 0 more running instance",
)

WARNING_MESSAGES = (
    " aborted operation.",
    " to YELLOW",
    "Adding instance ",
    "Degraded to Info",
    "Deleting SNS topic",
    "is currently running under desired capacity",
    "Ok to Info",
    "Ok to Warning",
    "Pending Initialization",
    "Removed instance ",
    "Rollback of environment",
)

# Rótulo e cor do attachment por nível de severidade
SEVERITY_LEVELS = {
    "low": {"label": "INFO", "color": "good"},
    "medium": {"label": "WARNING", "color": "warning"},
    "high": {"label": "ERROR", "color": "danger"},
}


def _split_env_list(name):
    raw = os.getenv(name, "").strip()
    return tuple(s.strip() for s in raw.split(",") if s.strip())


def _load_keyword_file(file_path):
    """Lê listas extras de palavras-chave de um arquivo JSON.

    Formato esperado: {"high": ["..."], "medium": ["..."]}. Arquivo ausente
    ou inválido resulta em listas vazias (as listas padrão continuam valendo).
    """
    extra = {"high": (), "medium": ()}
    if not file_path:
        return extra

    if not os.path.exists(file_path):
        logger.warning(f"Arquivo de palavras-chave não encontrado: {file_path}")
        return extra

    try:
        with open(file_path, 'r', encoding='utf-8') as fp:
            data = json.load(fp)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Falha ao ler arquivo de palavras-chave {file_path}: {exc}")
        return extra

    if not isinstance(data, dict):
        logger.warning(f"Arquivo de palavras-chave ignorado, esperado objeto JSON: {file_path}")
        return extra

    for tier in ("high", "medium"):
        values = data.get(tier) or []
        if isinstance(values, list):
            extra[tier] = tuple(str(v) for v in values if str(v))
    return extra


SEVERITY_KEYWORDS_FILE = os.getenv("SEVERITY_KEYWORDS_FILE")
_file_keywords = _load_keyword_file(SEVERITY_KEYWORDS_FILE)

# Listas efetivas: padrão + extras do ambiente + extras do arquivo
HIGH_SEVERITY_MESSAGES = DANGER_MESSAGES + _split_env_list("HIGH_SEVERITY_MESSAGES") + _file_keywords["high"]
MEDIUM_SEVERITY_MESSAGES = WARNING_MESSAGES + _split_env_list("MEDIUM_SEVERITY_MESSAGES") + _file_keywords["medium"]


def missing_settings():
    """Retorna os nomes das variáveis obrigatórias que não foram definidas."""
    required = {
        "SLACK_CHANNEL_NAME": SLACK_CHANNEL_NAME,
        "SLACK_PATH": SLACK_PATH,
        "ACCOUNT": ACCOUNT,
    }
    return [name for name, value in required.items() if not value]


def configure_logging():
    level = logging.DEBUG if DEBUG_MODE else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
