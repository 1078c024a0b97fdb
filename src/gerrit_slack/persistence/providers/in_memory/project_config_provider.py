# -*- coding: utf-8 -*-
"""In-memory project config provider (keyed by project name, falls back to defaults)."""

from __future__ import annotations

from typing import Mapping, Optional

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.persistence.providers.interfaces.project_config_provider import (
    IProjectConfigProvider,
)


class InMemoryProjectConfigProvider(IProjectConfigProvider):
    """Projects without an override inherit the server-wide defaults."""

    def __init__(
        self,
        defaults: Optional[ProjectConfig] = None,
        overrides: Optional[Mapping[str, ProjectConfig]] = None,
    ) -> None:
        self._defaults = defaults or ProjectConfig()
        self._overrides: dict[str, ProjectConfig] = {
            name.strip(): config for name, config in (overrides or {}).items()
        }

    def get(self, project: str) -> ProjectConfig:
        return self._overrides.get(project.strip(), self._defaults)

    def set_override(self, project: str, config: ProjectConfig) -> None:
        """Replace a project's configuration. Existing ProjectConfig objects are not touched."""
        self._overrides[project.strip()] = config
