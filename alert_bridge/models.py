from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from .detection import Severity


class EventSource(Enum):
    NOTIFICATION = "SNS"
    SECURITY_FINDING = "GuardDuty"
    SECURITY_FINDING_API = "GuardDuty API"
    UNIDENTIFIED = "UNKNOWN"


@dataclass(frozen=True)
class NormalizedEvent:
    title: str
    description: str
    severity: Severity
    source: EventSource


@dataclass(frozen=True)
class OutputMessage:
    channel: str
    username: str
    icon: str
    header: str
    attachments: Tuple[Dict[str, Any], ...] = field(default_factory=tuple)

    def to_payload(self) -> Dict[str, Any]:
        """Formato do incoming webhook do Slack."""
        return {
            "channel": self.channel,
            "username": self.username,
            "text": self.header,
            "icon_emoji": self.icon,
            "attachments": [dict(a) for a in self.attachments],
        }
