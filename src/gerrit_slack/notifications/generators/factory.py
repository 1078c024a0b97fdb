# -*- coding: utf-8 -*-
"""Generator dispatch: event runtime type -> message generator class."""

from __future__ import annotations

from typing import Any, Callable

import structlog

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import (
    ChangeEvent,
    ChangeMergedEvent,
    PatchSetCreatedEvent,
    PrivateStateChangedEvent,
    ReviewerAddedEvent,
    WorkInProgressStateChangedEvent,
)
from gerrit_slack.exceptions import UnsupportedEventKindError
from gerrit_slack.notifications.generators.base import BaseMessageGenerator
from gerrit_slack.notifications.generators.change_merged import ChangeMergedMessageGenerator
from gerrit_slack.notifications.generators.patch_set_created import (
    PatchSetCreatedMessageGenerator,
)
from gerrit_slack.notifications.generators.reviewer_added import ReviewerAddedMessageGenerator
from gerrit_slack.notifications.generators.state_changed import (
    PrivateStateChangedMessageGenerator,
    WorkInProgressStateChangedMessageGenerator,
)

# Exact types only: a subclass of a registered event is not silently handled.
_GENERATORS: dict[type[ChangeEvent], type[BaseMessageGenerator]] = {
    PatchSetCreatedEvent: PatchSetCreatedMessageGenerator,
    ChangeMergedEvent: ChangeMergedMessageGenerator,
    ReviewerAddedEvent: ReviewerAddedMessageGenerator,
    PrivateStateChangedEvent: PrivateStateChangedMessageGenerator,
    WorkInProgressStateChangedEvent: WorkInProgressStateChangedMessageGenerator,
}


def supported_event_types() -> tuple[type[ChangeEvent], ...]:
    """Event classes that have a message generator."""
    return tuple(_GENERATORS)


def new_generator(
    event: ChangeEvent,
    config: ProjectConfig,
    *,
    get_logger: Callable[[str], Any] = structlog.get_logger,
) -> BaseMessageGenerator:
    """Return the message generator for the event's kind.

    Args:
        event: Event to announce.
        config: Configuration of the event's project.
        get_logger: Logger factory passed to the generator.

    Raises:
        UnsupportedEventKindError: If no generator is registered for type(event).
    """
    generator_cls = _GENERATORS.get(type(event))
    if generator_cls is None:
        raise UnsupportedEventKindError(type(event).__name__)
    return generator_cls(event, config, get_logger=get_logger)
