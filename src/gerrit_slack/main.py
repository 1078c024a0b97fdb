# -*- coding: utf-8 -*-
"""
Entry point: announce Gerrit change events in Slack.

Orchestrates: logging, settings, container, notifier subscription, stream reader, shutdown.
Events flow: stdin (stream-events JSON lines) -> StreamEventReader -> event bus ->
ChangeEventNotifier -> publisher.

Run with:
    ssh -p 29418 gerrit.example.com gerrit stream-events | python -m gerrit_slack.main
"""
from __future__ import annotations

import asyncio
import signal
import sys
import structlog
from typing import Any, Optional, TextIO

from gerrit_slack.DI import Container
from gerrit_slack.config import get_settings
from gerrit_slack.exceptions import MissingRequiredConfigError
from gerrit_slack.logging.config import configure_logging
from gerrit_slack.services import open_stream


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(
            signal.SIGINT,
            lambda: shutdown_event.set(),
        )
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


def _remove_sigint() -> None:
    """Give SIGINT back to Python so a second Ctrl-C interrupts the shutdown."""
    try:
        asyncio.get_running_loop().remove_signal_handler(signal.SIGINT)
    except NotImplementedError:
        pass


async def _drain(event_bus: Any, logger: Any) -> None:
    """Let the bus finish handlers for events already dispatched."""
    await event_bus.wait_until_idle()
    logger.debug("main_event_bus_idle")


async def run(stream: Optional[TextIO] = None) -> None:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    if (
        settings.publisher.kind == "webhook"
        and settings.project.enabled
        and not settings.project.webhook_url.strip()
    ):
        logger.error(
            "main_missing_webhook_url",
            message="PROJECT__WEBHOOK_URL is not set",
        )
        raise MissingRequiredConfigError("PROJECT__WEBHOOK_URL")

    container = Container()
    event_bus = container.event_bus()
    publisher = container.publisher()
    notifier = container.change_event_notifier()
    reader = container.stream_event_reader()

    await publisher.initialize()
    notifier.start()
    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)

    try:
        async with open_stream(stream or sys.stdin) as lines:
            read_task = asyncio.create_task(reader.run(lines))
            stop_task = asyncio.create_task(shutdown_event.wait())
            logger.info(
                "main_started",
                publisher=settings.publisher.kind,
                channel=settings.project.channel,
                enabled=settings.project.enabled,
            )
            try:
                await asyncio.wait({read_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
            finally:
                for task in (read_task, stop_task):
                    task.cancel()
                await asyncio.gather(read_task, stop_task, return_exceptions=True)
    finally:
        _remove_sigint()
        await _drain(event_bus, logger)
        notifier.stop()
        await publisher.shutdown()
        await event_bus.stop()
        logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
