# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from gerrit_slack.config import Settings, get_settings
from gerrit_slack.events.bus import get_event_bus
from gerrit_slack.notifications.publishers import (
    BasePublisher,
    ConsolePublisher,
    WebhookPublisher,
)
from gerrit_slack.persistence.providers import InMemoryProjectConfigProvider
from gerrit_slack.services import ChangeEventNotifier, StreamEventReader


def _build_config_provider(settings: Settings) -> InMemoryProjectConfigProvider:
    """Every project inherits the server-wide PROJECT__* section."""
    return InMemoryProjectConfigProvider(defaults=settings.project)


def _build_publisher(settings: Settings) -> BasePublisher:
    if settings.publisher.kind == "console":
        return ConsolePublisher(settings=settings)
    return WebhookPublisher(settings=settings)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, event bus, config provider, publisher, services."""

    config = providers.Callable(get_settings)

    event_bus = providers.Callable(get_event_bus)

    project_config_provider = providers.Singleton(_build_config_provider, config)

    publisher = providers.Singleton(_build_publisher, config)

    change_event_notifier = providers.Singleton(
        ChangeEventNotifier,
        config_provider=project_config_provider,
        publisher=publisher,
        event_bus=event_bus,
    )

    stream_event_reader = providers.Singleton(
        StreamEventReader,
        event_bus=event_bus,
    )
