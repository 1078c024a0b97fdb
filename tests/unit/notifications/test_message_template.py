# -*- coding: utf-8 -*-
"""Unit tests for MessageTemplate rendering and clean()."""

from __future__ import annotations

import json
from typing import Any

import pytest

from gerrit_slack.exceptions import TemplateRenderError
from gerrit_slack.notifications.template import MessageFields, MessageTemplate, clean


def _fields(**overrides: Any) -> MessageFields:
    values: dict[str, Any] = {
        "channel": "general",
        "name": "Mr. Developer",
        "action": "proposed",
        "number": 1234,
        "project": "project",
        "branch": "master",
        "url": "https://gerrit/c/1234",
        "title": "This is a really great commit.",
    }
    values.update(overrides)
    return MessageFields(**values)


def test_render_produces_slack_attachment_payload() -> None:
    payload = json.loads(MessageTemplate(_fields()).render())

    assert payload["channel"] == "#general"
    assert len(payload["attachments"]) == 1
    attachment = payload["attachments"][0]
    assert attachment == {
        "fallback": "Mr. Developer proposed project (master) https://gerrit/c/1234: This is a really great commit.",
        "pretext": "Mr. Developer proposed <https://gerrit/c/1234|project (master) change 1234>",
        "title": "This is a really great commit.",
        "title_link": "https://gerrit/c/1234",
        "text": "",
        "color": "good",
    }


def test_render_is_deterministic() -> None:
    fields = _fields(message="Body text")

    assert MessageTemplate(fields).render() == MessageTemplate(fields).render()


def test_render_defaults_missing_title_and_message_to_empty() -> None:
    payload = json.loads(MessageTemplate(_fields(title=None, message=None)).render())

    attachment = payload["attachments"][0]
    assert attachment["title"] == ""
    assert attachment["text"] == ""
    assert attachment["fallback"].endswith("https://gerrit/c/1234: ")


def test_render_escapes_quotes_in_every_free_text_field() -> None:
    fields = _fields(
        name='Bobby "Tables"',
        project='proj"ect',
        branch='feature/"quoted"',
        title='Fix "the" bug',
        message='He said "hi"',
    )

    rendered = MessageTemplate(fields).render()
    payload = json.loads(rendered)

    assert '\\"Tables\\"' in rendered
    attachment = payload["attachments"][0]
    assert attachment["title"] == 'Fix "the" bug'
    assert attachment["text"] == 'He said "hi"'
    assert attachment["pretext"].startswith('Bobby "Tables" proposed')
    assert 'proj"ect (feature/"quoted")' in attachment["fallback"]


def test_render_keeps_payload_valid_with_backslashes_and_newlines() -> None:
    rendered = MessageTemplate(_fields(message="line one\nline \\two\t")).render()

    assert json.loads(rendered)["attachments"][0]["text"] == "line one\nline \\two"


def test_render_trims_surrounding_whitespace() -> None:
    payload = json.loads(MessageTemplate(_fields(name="  Spacey  ", title=" Title ")).render())

    attachment = payload["attachments"][0]
    assert attachment["title"] == "Title"
    assert attachment["pretext"].startswith("Spacey proposed")


def test_render_raises_template_render_error_when_resource_missing() -> None:
    template = MessageTemplate(_fields(), template_name="does-not-exist.json")

    with pytest.raises(TemplateRenderError) as exc_info:
        template.render()

    assert exc_info.value.resource == "does-not-exist.json"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        ("plain", "plain"),
        ('say "hi"', 'say \\"hi\\"'),
        ("  padded  ", "padded"),
        ("back\\slash", "back\\\\slash"),
        ("two\nlines", "two\\nlines"),
        ("café", "café"),
    ],
)
def test_clean(value: str | None, expected: str) -> None:
    assert clean(value) == expected
