# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import (
    AccountAttribute,
    ChangeAttribute,
    PatchSetAttribute,
)


class RecordingLogger:
    """structlog-like logger that keeps (level, event, kwargs) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kwargs: Any) -> None:
        self.records.append((level, event, kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        self._record("debug", event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._record("info", event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._record("error", event, **kwargs)

    def events(self, level: str) -> list[str]:
        return [event for lvl, event, _ in self.records if lvl == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Fresh recording logger per test."""
    return RecordingLogger()


@pytest.fixture
def get_logger(recording_logger: RecordingLogger) -> Callable[[str], RecordingLogger]:
    """Logger factory that always returns the test's recording logger."""
    return lambda name: recording_logger


@pytest.fixture
def project_config_factory() -> Callable[..., ProjectConfig]:
    """Enabled config posting to #testchannel, ignoring 'WIP' commits; override any field."""

    def _build(**overrides: Any) -> ProjectConfig:
        values: dict[str, Any] = {
            "enabled": True,
            "webhook_url": "https://webook/",
            "channel": "testchannel",
            "username": "testuser",
            "ignore": "^WIP.*",
        }
        values.update(overrides)
        return ProjectConfig(**values)

    return _build


@pytest.fixture
def change_factory() -> Callable[..., ChangeAttribute]:
    """Build ChangeAttribute with the values used by the rendering examples."""

    def _build(**overrides: Any) -> ChangeAttribute:
        values: dict[str, Any] = {
            "number": 1234,
            "project": "testproject",
            "branch": "master",
            "url": "https://change/",
            "commit_message": "This is the title\nThis is the message body.",
            "is_private": False,
            "wip": False,
        }
        values.update(overrides)
        return ChangeAttribute(**values)

    return _build


@pytest.fixture
def account() -> AccountAttribute:
    """Acting account used by tests."""
    return AccountAttribute(name="Unit Tester", email="unit@example.com", username="unit")


@pytest.fixture
def patch_set_factory() -> Callable[..., PatchSetAttribute]:
    def _build(kind: str | None = "REWORK", **overrides: Any) -> PatchSetAttribute:
        return PatchSetAttribute(number=overrides.pop("number", 2), kind=kind, **overrides)

    return _build
