"""Application services."""

from gerrit_slack.services.change_event_notifier import ChangeEventNotifier
from gerrit_slack.services.stream_event_reader import StreamEventReader, open_stream

__all__ = ["ChangeEventNotifier", "StreamEventReader", "open_stream"]
