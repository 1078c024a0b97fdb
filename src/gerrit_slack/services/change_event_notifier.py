# -*- coding: utf-8 -*-
"""ChangeEventNotifier: listens to change events and publishes Slack messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog
from structlog.contextvars import bound_contextvars

from gerrit_slack.events.change_events import ChangeEvent
from gerrit_slack.notifications.generators import new_generator, supported_event_types

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from gerrit_slack.notifications.publishers import BasePublisher
    from gerrit_slack.persistence.providers import IProjectConfigProvider


class ChangeEventNotifier:
    """Subscribes to every change event with a generator and publishes its message.

    Per event: resolve project config -> pick generator -> should_publish ->
    generate -> publisher.deliver(payload, webhook_url).
    """

    def __init__(
        self,
        config_provider: "IProjectConfigProvider",
        publisher: "BasePublisher",
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._config_provider = config_provider
        self._publisher = publisher
        self._event_bus: "EventBus" = event_bus
        self._get_logger = get_logger
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def start(self) -> None:
        """Subscribe to all supported change events."""
        for event_type in supported_event_types():
            self._event_bus.on(event_type, self._on_event)
        self._logger.debug(
            "change_event_notifier_started",
            event_types=[t.__name__ for t in supported_event_types()],
        )

    def stop(self) -> None:
        """Unsubscribe from all supported change events."""
        handlers = getattr(self._event_bus, "handlers", {})
        for event_type in supported_event_types():
            key = event_type.__name__
            if key in handlers:
                handlers[key] = [h for h in handlers[key] if h != self._on_event]
        self._logger.debug("change_event_notifier_stopped")

    async def _on_event(self, event: ChangeEvent) -> None:
        await self.notify(event)

    async def notify(self, event: ChangeEvent) -> bool:
        """Decide, render and deliver the message for one event.

        Returns:
            True if a message was delivered.

        Raises:
            UnsupportedEventKindError: If the event has no generator.
        """
        change = event.change
        if change is None:
            self._logger.warning(
                "change_event_without_change",
                event_type=type(event).__name__,
            )
            return False

        with bound_contextvars(
            event_type=type(event).__name__,
            gerrit_project=change.project,
            gerrit_change=change.number,
        ):
            config = self._config_provider.get(change.project)
            generator = new_generator(event, config, get_logger=self._get_logger)
            if not generator.should_publish():
                self._logger.debug("change_event_suppressed")
                return False

            payload = generator.generate()
            if not payload:
                self._logger.warning("change_event_message_empty")
                return False

            delivered = await self._publisher.deliver(payload, config.webhook_url)
            if delivered:
                self._logger.info("change_event_published", channel=config.channel)
            else:
                self._logger.warning("change_event_publish_failed", channel=config.channel)
            return delivered
