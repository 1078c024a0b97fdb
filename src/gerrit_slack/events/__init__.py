# -*- coding: utf-8 -*-
"""Event bus, change events and stream-events parsing."""

from gerrit_slack.events.bus import get_event_bus, set_event_bus
from gerrit_slack.events.change_events import (
    AccountAttribute,
    ChangeAttribute,
    ChangeEvent,
    ChangeKind,
    ChangeMergedEvent,
    PatchSetAttribute,
    PatchSetCreatedEvent,
    PrivateStateChangedEvent,
    ReviewerAddedEvent,
    WorkInProgressStateChangedEvent,
)
from gerrit_slack.events.parser import parse_stream_event

__all__ = [
    "AccountAttribute",
    "ChangeAttribute",
    "ChangeEvent",
    "ChangeKind",
    "ChangeMergedEvent",
    "PatchSetAttribute",
    "PatchSetCreatedEvent",
    "PrivateStateChangedEvent",
    "ReviewerAddedEvent",
    "WorkInProgressStateChangedEvent",
    "get_event_bus",
    "parse_stream_event",
    "set_event_bus",
]
