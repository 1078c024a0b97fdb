# -*- coding: utf-8 -*-
"""Provider interfaces (abstractions). Implementations live in in_memory/."""

from gerrit_slack.persistence.providers.interfaces.project_config_provider import (
    IProjectConfigProvider,
)

__all__ = ["IProjectConfigProvider"]
