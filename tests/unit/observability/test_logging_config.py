# -*- coding: utf-8 -*-
"""Unit tests for configure_logging and its processors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest
import structlog

from gerrit_slack.config import AppSettings, LoggingSettings, Settings
from gerrit_slack.logging.config import _build_handlers, _service_context, configure_logging


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_service_context_uses_given_app_settings() -> None:
    processor = _service_context(
        AppSettings(app_name="gerrit-slack-staging", service_version="1.2.3", environment="test")
    )
    logger = logging.getLogger("ChangeEventNotifier")

    event_dict = processor(logger, "info", {"event": "change_event_published"})

    assert event_dict["logger"] == "ChangeEventNotifier"
    assert event_dict["app_name"] == "gerrit-slack-staging"
    assert event_dict["service_version"] == "1.2.3"
    assert event_dict["environment"] == "test"
    assert "service_name" not in event_dict


def test_build_handlers_for_console_and_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "gerrit_slack.log"
    handlers = _build_handlers(
        LoggingSettings(
            log_to_console=True,
            console_level="WARNING",
            log_to_file=True,
            file_level="DEBUG",
            log_file_path=str(log_file),
        )
    )
    try:
        assert [type(h) for h in handlers] == [logging.StreamHandler, TimedRotatingFileHandler]
        assert [h.level for h in handlers] == [logging.WARNING, logging.DEBUG]
        assert log_file.parent.is_dir()
    finally:
        for handler in handlers:
            handler.close()


def test_build_handlers_can_be_disabled() -> None:
    assert _build_handlers(LoggingSettings(log_to_console=False, log_to_file=False)) == []


def test_configure_logging_reads_passed_settings(reset_structlog: None) -> None:
    settings = Settings.from_env(
        app={"app_name": "from-arguments"},
        logging={"log_to_console": False, "log_to_file": False},
    )

    configure_logging(settings)

    processors = structlog.get_config()["processors"]
    context = [p for p in processors if getattr(p, "__name__", "") == "_add_service_context"]
    assert len(context) == 1
    assert context[0](None, "info", {})["app_name"] == "from-arguments"
