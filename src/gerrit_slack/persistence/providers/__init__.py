"""Configuration providers."""

from gerrit_slack.persistence.providers.in_memory import InMemoryProjectConfigProvider
from gerrit_slack.persistence.providers.interfaces import IProjectConfigProvider

__all__ = ["IProjectConfigProvider", "InMemoryProjectConfigProvider"]
