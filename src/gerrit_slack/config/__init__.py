"""Configuration subpackage."""

from gerrit_slack.config.config import (
    AppSettings,
    LoggingSettings,
    PublisherSettings,
    Settings,
    get_settings,
)
from gerrit_slack.config.project_config import ProjectConfig

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "ProjectConfig",
    "PublisherSettings",
    "Settings",
    "get_settings",
]
