"""In-memory provider implementations."""

from gerrit_slack.persistence.providers.in_memory.project_config_provider import (
    InMemoryProjectConfigProvider,
)

__all__ = ["InMemoryProjectConfigProvider"]
