# -*- coding: utf-8 -*-
"""Slack incoming-webhook publisher (async, aiohttp)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Callable, Optional

import aiohttp
import structlog
from structlog.contextvars import bound_contextvars

from gerrit_slack.notifications.publishers.base import BasePublisher

if TYPE_CHECKING:  # pragma: no cover
    from gerrit_slack.config.config import Settings


class WebhookPublisher(BasePublisher):
    """POST payloads to a Slack incoming webhook. One attempt per payload.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created on initialize() and closed on shutdown().
    """

    def __init__(
        self,
        settings: "Settings",
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        if self._running:
            self._logger.warning("webhook_publisher_already_running")
            return
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.settings.publisher.timeout_seconds)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                headers={"User-Agent": self.settings.publisher.user_agent},
            )
            self._owns_session = True
        self._running = True

    async def shutdown(self) -> None:
        if not self._running:
            return
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None
        self._running = False

    async def deliver(self, payload: str, destination: str) -> bool:
        """POST payload to the webhook URL; True on a 2xx response."""
        if not destination:
            self._logger.warning("webhook_destination_missing")
            return False
        if not self._running or self._session is None:
            self._logger.warning("webhook_publisher_not_running_cannot_send")
            return False

        with bound_contextvars(webhook_payload_bytes=len(payload.encode("utf-8"))):
            try:
                async with self._session.post(
                    destination,
                    data=payload.encode("utf-8"),
                    headers={"Content-Type": "application/json"},
                ) as response:
                    if 200 <= response.status < 300:
                        self._logger.debug("webhook_delivered", http_status_code=response.status)
                        return True
                    body = await response.text()
                    self._logger.error(
                        "webhook_rejected",
                        http_status_code=response.status,
                        response_body=body[:200],
                    )
                    return False
            except asyncio.TimeoutError:
                self._logger.error(
                    "webhook_timeout",
                    timeout_seconds=self.settings.publisher.timeout_seconds,
                )
                return False
            except aiohttp.ClientError as exc:
                self._logger.error(
                    "webhook_network_error",
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )
                return False
