#!/usr/bin/env python3
import json
import unittest
from unittest.mock import patch

from alert_bridge.detection import Severity
from alert_bridge.formatters import render
from alert_bridge.models import EventSource, NormalizedEvent
from alert_bridge.normalizer import normalize


class TestRender(unittest.TestCase):
    def test_render_fields(self):
        event = NormalizedEvent("Deploy Alert", "Failed to deploy application X", Severity.HIGH, EventSource.NOTIFICATION)
        message = render(event, channel="#alerts")
        self.assertEqual(message.channel, "#alerts")
        self.assertEqual(message.username, "AWS Alerts")
        self.assertEqual(message.icon, ":aws:")
        self.assertEqual(message.header, "*ERROR:Deploy Alert*")
        self.assertEqual(message.attachments, ({"color": "danger", "text": "Failed to deploy application X"},))

    def test_header_per_severity(self):
        for severity, label, color in [
            (Severity.LOW, "INFO", "good"),
            (Severity.MEDIUM, "WARNING", "warning"),
            (Severity.HIGH, "ERROR", "danger"),
        ]:
            message = render(NormalizedEvent("t", "d", severity, EventSource.NOTIFICATION), channel="c")
            self.assertEqual(message.header, f"*{label}:t*")
            self.assertEqual(message.attachments[0]["color"], color)

    def test_title_asterisks_not_escaped(self):
        message = render(NormalizedEvent("a*b", "d", Severity.LOW, EventSource.NOTIFICATION), channel="c")
        self.assertEqual(message.header, "*INFO:a*b*")

    def test_default_channel_from_config(self):
        with patch('alert_bridge.formatters.SLACK_CHANNEL_NAME', '#ops'):
            message = render(NormalizedEvent("t", "d", Severity.LOW, EventSource.NOTIFICATION))
        self.assertEqual(message.channel, "#ops")

    def test_to_payload(self):
        message = render(NormalizedEvent("t", "line1\nline2", Severity.MEDIUM, EventSource.SECURITY_FINDING_API), channel="#c")
        self.assertEqual(message.to_payload(), {
            "channel": "#c",
            "username": "AWS Alerts",
            "text": "*WARNING:t*",
            "icon_emoji": ":aws:",
            "attachments": [{"color": "warning", "text": "line1\nline2"}],
        })

    def test_render_is_deterministic(self):
        envelope = {"Records": [{"Sns": {"Subject": "S", "Message": "Rollback of environment prod"}}]}
        first = json.dumps(render(normalize(envelope), channel="#c").to_payload())
        second = json.dumps(render(normalize(envelope), channel="#c").to_payload())
        self.assertEqual(first, second)


if __name__ == '__main__':
    unittest.main()
