# -*- coding: utf-8 -*-
"""Unit tests for the generator dispatcher and BaseMessageGenerator."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import patch

import pytest

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import (
    AccountAttribute,
    ChangeAttribute,
    ChangeEvent,
    ChangeMergedEvent,
    PatchSetCreatedEvent,
    PrivateStateChangedEvent,
    ReviewerAddedEvent,
    WorkInProgressStateChangedEvent,
)
from gerrit_slack.exceptions import TemplateRenderError, UnsupportedEventKindError
from gerrit_slack.notifications.generators import (
    ChangeMergedMessageGenerator,
    PatchSetCreatedMessageGenerator,
    first_line,
    new_generator,
    supported_event_types,
)


class CustomMergedEvent(ChangeMergedEvent):
    pass


def test_supported_event_types_lists_every_kind() -> None:
    assert set(supported_event_types()) == {
        PatchSetCreatedEvent,
        ChangeMergedEvent,
        ReviewerAddedEvent,
        PrivateStateChangedEvent,
        WorkInProgressStateChangedEvent,
    }


@pytest.mark.parametrize("event_cls", [ChangeEvent, CustomMergedEvent])
def test_unregistered_event_type_raises(
    event_cls: type[ChangeEvent],
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
) -> None:
    with pytest.raises(UnsupportedEventKindError) as exc_info:
        new_generator(event_cls(change=change_factory()), project_config_factory())

    assert exc_info.value.event_type == event_cls.__name__


def test_generator_requires_event(project_config_factory: Callable[..., ProjectConfig]) -> None:
    with pytest.raises(ValueError):
        PatchSetCreatedMessageGenerator(None, project_config_factory())  # type: ignore[arg-type]


def test_generator_exposes_event_and_config(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=account)
    config = project_config_factory()

    generator = new_generator(event, config)

    assert generator.event is event
    assert generator.config is config


def test_generate_logs_template_errors(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
    get_logger: Callable,
    recording_logger,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=account)
    generator = ChangeMergedMessageGenerator(event, project_config_factory(), get_logger=get_logger)
    error = TemplateRenderError("missing", resource="message-template.json")

    with patch(
        "gerrit_slack.notifications.generators.base.MessageTemplate.render", side_effect=error
    ):
        assert generator.generate() == ""

    assert recording_logger.events("error") == ["message_render_failed"]


def test_generate_logs_unexpected_errors(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
    get_logger: Callable,
    recording_logger,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=account)
    generator = ChangeMergedMessageGenerator(event, project_config_factory(), get_logger=get_logger)

    with patch.object(ChangeMergedMessageGenerator, "message_fields", side_effect=RuntimeError("x")):
        assert generator.generate() == ""

    assert recording_logger.events("error") == ["message_generation_unexpected_error"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Title\nBody", "Title"),
        ("Only title", "Only title"),
        ("", ""),
        (None, None),
    ],
)
def test_first_line(text: str | None, expected: str | None) -> None:
    assert first_line(text) == expected
