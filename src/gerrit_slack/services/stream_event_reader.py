# -*- coding: utf-8 -*-
"""Read Gerrit stream-events JSON lines and dispatch them on the event bus."""

from __future__ import annotations

import asyncio
import json
import os
import stat
from contextlib import asynccontextmanager
from typing import IO, Any, AsyncIterator, Callable, Optional

import structlog
from pydantic import ValidationError

from gerrit_slack.events.parser import parse_stream_event

# Commit messages can be long; one stream-events line must fit in the buffer.
STREAM_LINE_LIMIT = 1024 * 1024


@asynccontextmanager
async def open_stream(pipe: IO[Any]) -> AsyncIterator[asyncio.StreamReader]:
    """Expose a pipe, socket or terminal (e.g. sys.stdin) as an asyncio.StreamReader.

    Reads happen on the event loop, so a pending readline() is cancelled with
    its task and no thread is left blocked on an open stdin. Regular files
    (`gerrit-slack < events.json`) cannot be polled and are fed in full.
    The descriptor is restored to blocking mode on exit.
    """
    fd = pipe.fileno()
    reader = asyncio.StreamReader(limit=STREAM_LINE_LIMIT)
    if stat.S_ISREG(os.fstat(fd).st_mode):
        with os.fdopen(os.dup(fd), "rb") as source:
            reader.feed_data(source.read())
        reader.feed_eof()
        yield reader
        return

    loop = asyncio.get_running_loop()
    transport, _ = await loop.connect_read_pipe(
        lambda: asyncio.StreamReaderProtocol(reader),
        os.fdopen(os.dup(fd), "rb", buffering=0),
    )
    try:
        yield reader
    finally:
        transport.close()
        os.set_blocking(fd, True)


class StreamEventReader:
    """Turns a stream of stream-events lines into bus events.

    Blank lines, invalid JSON and malformed events are logged and skipped;
    event types without a notification are skipped silently (debug).
    """

    def __init__(
        self,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._event_bus = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def dispatch_line(self, line: str) -> bool:
        """Parse one line and dispatch its event. Returns True if an event was dispatched."""
        line = line.strip()
        if not line:
            return False
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            self._logger.warning("stream_event_invalid_json", error_message=str(exc))
            return False
        if not isinstance(data, dict):
            self._logger.warning("stream_event_not_an_object", value_type=type(data).__name__)
            return False

        stream_type = data.get("type")
        try:
            event = parse_stream_event(data)
        except (ValidationError, TypeError, ValueError) as exc:
            self._logger.warning(
                "stream_event_malformed",
                stream_event_type=stream_type,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return False
        if event is None:
            self._logger.debug("stream_event_skipped", stream_event_type=stream_type)
            return False

        self._event_bus.dispatch(event)
        return True

    async def run(self, stream: asyncio.StreamReader) -> int:
        """Read until EOF, dispatching each event. Cancelling the task stops the read.

        Returns:
            Number of events dispatched.
        """
        dispatched = 0
        while True:
            try:
                raw = await stream.readline()
            except ValueError:
                # Over the buffer limit: asyncio drops the buffered part of the line.
                self._logger.warning("stream_event_line_too_long", limit_bytes=STREAM_LINE_LIMIT)
                continue
            if not raw:
                break
            if self.dispatch_line(raw.decode("utf-8", errors="replace")):
                dispatched += 1
        self._logger.debug("stream_event_reader_eof", dispatched_count=dispatched)
        return dispatched
