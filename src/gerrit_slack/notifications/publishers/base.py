# -*- coding: utf-8 -*-
"""Base publisher: delivers a rendered payload to one destination."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from gerrit_slack.config.config import Settings


class BasePublisher(ABC):
    """Abstract base class for payload publishers."""

    def __init__(self, settings: "Settings"):
        """
        Args:
            settings: Global configuration (Settings).
        """
        self.settings = settings

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether the publisher accepts deliveries."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        pass

    @abstractmethod
    async def deliver(self, payload: str, destination: str) -> bool:
        """
        Deliver a rendered payload.

        Args:
            payload: Rendered JSON message.
            destination: Where to deliver it (webhook URL).

        Returns:
            True if the payload was accepted, otherwise False.
        """
        pass
