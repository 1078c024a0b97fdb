# -*- coding: utf-8 -*-
"""Slack message template: typed fields rendered into the packaged JSON template.

Every free-text field passes through clean() before substitution so that
quotes, backslashes and control characters cannot break the JSON document.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from string import Template
from typing import Optional

from gerrit_slack.exceptions import TemplateRenderError

DEFAULT_TEMPLATE = "message-template.json"
_RESOURCE_PACKAGE = "gerrit_slack.notifications.resources"
SUCCESS_COLOR = "good"


def clean(value: Optional[str]) -> str:
    """Make a value safe to embed inside a JSON string literal of the template.

    Trims leading/trailing whitespace and JSON-escapes the rest (double quotes,
    backslashes, newlines and other control characters). None becomes "".
    """
    if value is None:
        return ""
    return json.dumps(value.strip(), ensure_ascii=False)[1:-1]


@lru_cache(maxsize=8)
def load_template(name: str = DEFAULT_TEMPLATE) -> Template:
    """Load and cache a packaged template by file name.

    Raises:
        TemplateRenderError: If the resource does not exist or cannot be read.
    """
    try:
        text = resources.files(_RESOURCE_PACKAGE).joinpath(name).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as exc:
        raise TemplateRenderError(
            f"Cannot load template resource {name!r}", resource=name, cause=exc
        ) from exc
    return Template(text)


@dataclass(frozen=True)
class MessageFields:
    """Values substituted into the message template."""

    channel: str
    name: Optional[str]
    action: str
    number: int
    project: str
    branch: str
    url: str
    title: Optional[str] = None
    """First line of the commit message, shown as the attachment title."""
    message: Optional[str] = None
    """Attachment body text."""


class MessageTemplate:
    """Renders MessageFields into a Slack webhook payload."""

    def __init__(self, fields: MessageFields, *, template_name: str = DEFAULT_TEMPLATE) -> None:
        self._fields = fields
        self._template_name = template_name

    def substitutions(self) -> dict[str, str]:
        """Return the cleaned template values keyed by placeholder name."""
        f = self._fields
        return {
            "channel": clean(f.channel),
            "name": clean(f.name),
            "action": clean(f.action),
            "project": clean(f.project),
            "branch": clean(f.branch),
            "url": clean(f.url),
            "number": str(f.number),
            "title": clean(f.title),
            "message": clean(f.message),
            "color": SUCCESS_COLOR,
        }

    def render(self) -> str:
        """Render the payload.

        Returns:
            The JSON payload text.

        Raises:
            TemplateRenderError: If the template cannot be loaded or has
                placeholders without a value.
        """
        template = load_template(self._template_name)
        try:
            return template.substitute(self.substitutions())
        except (KeyError, ValueError) as exc:
            raise TemplateRenderError(
                f"Cannot substitute template {self._template_name!r}: {exc}",
                resource=self._template_name,
                cause=exc,
            ) from exc
