"""gerrit-slack: publish Gerrit change events to Slack."""

from gerrit_slack.config import ProjectConfig, get_settings
from gerrit_slack.DI import Container
from gerrit_slack.notifications import MessageTemplate, new_generator
from gerrit_slack.services import ChangeEventNotifier

__version__ = "0.1.0"
__all__ = [
    "ChangeEventNotifier",
    "Container",
    "MessageTemplate",
    "ProjectConfig",
    "get_settings",
    "new_generator",
]
