# -*- coding: utf-8 -*-
"""Unit tests for ChangeMergedMessageGenerator."""

from __future__ import annotations

import json
from collections.abc import Callable

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import (
    AccountAttribute,
    ChangeAttribute,
    ChangeMergedEvent,
)
from gerrit_slack.notifications.generators import ChangeMergedMessageGenerator, new_generator


def test_factory_returns_change_merged_generator(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=account)

    assert isinstance(new_generator(event, project_config_factory()), ChangeMergedMessageGenerator)


def test_publishes_even_private_wip_changes(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
) -> None:
    event = ChangeMergedEvent(change=change_factory(is_private=True, wip=True), submitter=account)

    assert new_generator(event, project_config_factory()).should_publish() is True


def test_toggle_off_suppresses(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=account)
    config = project_config_factory(publish_on_change_merged=False)

    assert new_generator(event, config).should_publish() is False


def test_subject_goes_in_body(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=account)

    payload = json.loads(new_generator(event, project_config_factory()).generate())

    attachment = payload["attachments"][0]
    assert attachment["text"] == "This is the title"
    assert attachment["title"] == ""
    assert attachment["pretext"] == (
        "Unit Tester merged <https://change/|testproject (master) change 1234>"
    )
    assert attachment["fallback"] == "Unit Tester merged testproject (master) https://change/: "


def test_missing_submitter_yields_empty_message(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    get_logger: Callable,
    recording_logger,
) -> None:
    event = ChangeMergedEvent(change=change_factory(), submitter=None)

    assert new_generator(event, project_config_factory(), get_logger=get_logger).generate() == ""
    assert recording_logger.records[0][2]["missing_attribute"] == "submitter"


def test_body_falls_back_to_subject_without_commit_message(
    project_config_factory: Callable[..., ProjectConfig],
    change_factory: Callable[..., ChangeAttribute],
    account: AccountAttribute,
) -> None:
    change = change_factory(commit_message=None, subject="Merged subject")
    event = ChangeMergedEvent(change=change, submitter=account)

    payload = json.loads(new_generator(event, project_config_factory()).generate())

    assert payload["attachments"][0]["text"] == "Merged subject"
