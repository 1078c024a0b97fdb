"""Abstract interface for per-project configuration lookup (in-memory, Gerrit, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gerrit_slack.config.project_config import ProjectConfig


class IProjectConfigProvider(ABC):
    """Read-only source of ProjectConfig records."""

    @abstractmethod
    def get(self, project: str) -> ProjectConfig:
        """Return the effective configuration for a project (never None)."""
        ...
