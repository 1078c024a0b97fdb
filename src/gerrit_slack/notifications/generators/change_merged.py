"""Message generator for merged changes."""

from __future__ import annotations

from gerrit_slack.events.change_events import ChangeMergedEvent
from gerrit_slack.notifications.generators.base import BaseMessageGenerator
from gerrit_slack.notifications.policy import CHANGE_MERGED_POLICY
from gerrit_slack.notifications.template import MessageFields


class ChangeMergedMessageGenerator(BaseMessageGenerator):
    """Announces a merge. The commit subject goes in the body, not the title."""

    policy = CHANGE_MERGED_POLICY
    action = "merged"

    _event: ChangeMergedEvent

    def message_fields(self) -> MessageFields:
        return self._fields(
            self._event.submitter,
            "submitter",
            message=self._subject(),
        )
