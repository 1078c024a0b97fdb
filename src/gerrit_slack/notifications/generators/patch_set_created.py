"""Message generator for newly uploaded patch sets."""

from __future__ import annotations

from gerrit_slack.events.change_events import PatchSetCreatedEvent
from gerrit_slack.notifications.generators.base import BaseMessageGenerator
from gerrit_slack.notifications.policy import PATCH_SET_CREATED_POLICY
from gerrit_slack.notifications.template import MessageFields


class PatchSetCreatedMessageGenerator(BaseMessageGenerator):
    """Announces a proposed patch set, titled with the commit subject."""

    policy = PATCH_SET_CREATED_POLICY
    action = "proposed"

    _event: PatchSetCreatedEvent

    def message_fields(self) -> MessageFields:
        return self._fields(
            self._event.uploader,
            "uploader",
            title=self._subject(),
        )
