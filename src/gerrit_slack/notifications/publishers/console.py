# -*- coding: utf-8 -*-
"""Console publisher (print-based dry run)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gerrit_slack.notifications.publishers.base import BasePublisher

if TYPE_CHECKING:  # pragma: no cover
    from gerrit_slack.config.config import Settings


class ConsolePublisher(BasePublisher):
    """Print payloads to stdout instead of posting them."""

    def __init__(self, settings: "Settings") -> None:
        super().__init__(settings)
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def deliver(self, payload: str, destination: str) -> bool:
        if not self.is_running:
            return False
        print(f"# {destination or '<no destination>'}")
        print(payload)
        return True
