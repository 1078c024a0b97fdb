"""Message generators for private and work-in-progress state transitions.

Both announce the change as proposed once it becomes visible/ready; the
policies suppress the opposite transition.
"""

from __future__ import annotations

from gerrit_slack.events.change_events import (
    PrivateStateChangedEvent,
    WorkInProgressStateChangedEvent,
)
from gerrit_slack.notifications.generators.base import BaseMessageGenerator
from gerrit_slack.notifications.policy import (
    PRIVATE_STATE_CHANGED_POLICY,
    WORK_IN_PROGRESS_STATE_CHANGED_POLICY,
)
from gerrit_slack.notifications.template import MessageFields


class PrivateStateChangedMessageGenerator(BaseMessageGenerator):
    policy = PRIVATE_STATE_CHANGED_POLICY
    action = "proposed"

    _event: PrivateStateChangedEvent

    def message_fields(self) -> MessageFields:
        return self._fields(
            self._event.changer,
            "changer",
            title=self._subject(),
        )


class WorkInProgressStateChangedMessageGenerator(BaseMessageGenerator):
    policy = WORK_IN_PROGRESS_STATE_CHANGED_POLICY
    action = "proposed"

    _event: WorkInProgressStateChangedEvent

    def message_fields(self) -> MessageFields:
        return self._fields(
            self._event.changer,
            "changer",
            title=self._subject(),
        )
