"""Publishers that deliver rendered payloads."""

from gerrit_slack.notifications.publishers.base import BasePublisher
from gerrit_slack.notifications.publishers.console import ConsolePublisher
from gerrit_slack.notifications.publishers.webhook import WebhookPublisher

__all__ = [
    "BasePublisher",
    "ConsolePublisher",
    "WebhookPublisher",
]
