"""Notification pipeline: publish policies, message generators, template, publishers."""

from gerrit_slack.notifications.generators import (
    BaseMessageGenerator,
    new_generator,
    supported_event_types,
)
from gerrit_slack.notifications.policy import PublishDecision, PublishPolicy
from gerrit_slack.notifications.publishers import (
    BasePublisher,
    ConsolePublisher,
    WebhookPublisher,
)
from gerrit_slack.notifications.template import MessageFields, MessageTemplate, clean

__all__ = [
    "BaseMessageGenerator",
    "BasePublisher",
    "ConsolePublisher",
    "MessageFields",
    "MessageTemplate",
    "PublishDecision",
    "PublishPolicy",
    "WebhookPublisher",
    "clean",
    "new_generator",
    "supported_event_types",
]
