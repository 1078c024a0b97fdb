# -*- coding: utf-8 -*-
"""Per-project notification configuration (read-only record)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectConfig(BaseModel):
    """Notification settings for one Gerrit project.

    Frozen: a generator reads it for one decision and must never change it.
    Defaults mirror the server-wide section of the plugin configuration.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = False
    webhook_url: str = Field(default="", description="Slack incoming webhook URL.")
    channel: str = Field(default="general", description="Channel name, without '#'.")
    username: str = "gerrit"
    ignore: Optional[str] = Field(
        default="",
        description="Commit messages fully matching this regex (DOTALL) are not published.",
    )

    # Per event kind
    publish_on_patch_set_created: bool = True
    publish_on_change_merged: bool = True
    publish_on_reviewer_added: bool = True
    publish_on_wip_ready: bool = True
    publish_on_private_to_public: bool = True

    # Suppression toggles
    ignore_unchanged_patch_set: bool = True
    ignore_private_patch_set: bool = True
    ignore_wip_patch_set: bool = True
