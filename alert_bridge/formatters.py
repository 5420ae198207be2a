from .constants import SLACK_CHANNEL_NAME, SLACK_USERNAME, SLACK_ICON_EMOJI
from .detection import severity_label, severity_color
from .models import OutputMessage


def format_header(event):
    # Markdown do Slack: título em negrito, sem escapar '*' do título
    return "*" + severity_label(event.severity) + ":" + event.title + "*"


def render(event, channel=None):
    if channel is None:
        channel = SLACK_CHANNEL_NAME

    return OutputMessage(
        channel=channel,
        username=SLACK_USERNAME,
        icon=SLACK_ICON_EMOJI,
        header=format_header(event),
        attachments=(
            {
                "color": severity_color(event.severity),
                "text": event.description,
            },
        ),
    )
