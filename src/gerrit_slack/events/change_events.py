"""Change lifecycle events published by the Gerrit event source.

Each event carries the change it concerns and the account that acted on it.
Nested attributes are optional: the host platform may omit them, and the
notification pipeline degrades instead of failing when they are missing.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from bubus import BaseEvent  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict


class ChangeKind(str, Enum):
    """How a new patch set differs from the previous one."""

    REWORK = "REWORK"
    TRIVIAL_REBASE = "TRIVIAL_REBASE"
    MERGE_FIRST_PARENT_UPDATE = "MERGE_FIRST_PARENT_UPDATE"
    NO_CODE_CHANGE = "NO_CODE_CHANGE"
    NO_CHANGE = "NO_CHANGE"


class AccountAttribute(BaseModel):
    """Account that triggered the event."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    """Display name."""
    email: Optional[str] = None
    username: Optional[str] = None


class ChangeAttribute(BaseModel):
    """Identity and state of a change at the time of the event."""

    model_config = ConfigDict(frozen=True)

    number: int
    project: str
    branch: str
    url: str
    subject: Optional[str] = None
    """First line of the commit message."""
    commit_message: Optional[str] = None
    is_private: Optional[bool] = None
    wip: Optional[bool] = None


class PatchSetAttribute(BaseModel):
    """Patch set revision carried by patch set events."""

    model_config = ConfigDict(frozen=True)

    number: Optional[int] = None
    revision: Optional[str] = None
    kind: Optional[str] = None
    """Raw change kind; see ChangeKind for the recognized values."""


class ChangeEvent(BaseEvent[None]):
    """Base for events that concern a single change."""

    change: Optional[ChangeAttribute] = None


class PatchSetCreatedEvent(ChangeEvent):
    """A new patch set was uploaded."""

    uploader: Optional[AccountAttribute] = None
    patch_set: Optional[PatchSetAttribute] = None


class ChangeMergedEvent(ChangeEvent):
    """A change was submitted and merged."""

    submitter: Optional[AccountAttribute] = None


class ReviewerAddedEvent(ChangeEvent):
    """A reviewer was added to a change."""

    reviewer: Optional[AccountAttribute] = None


class PrivateStateChangedEvent(ChangeEvent):
    """A change was made private or public. `change.is_private` holds the new state."""

    changer: Optional[AccountAttribute] = None


class WorkInProgressStateChangedEvent(ChangeEvent):
    """A change was marked work-in-progress or ready. `change.wip` holds the new state."""

    changer: Optional[AccountAttribute] = None
