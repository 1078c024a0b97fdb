"""Message generator for reviewers added to a change."""

from __future__ import annotations

from gerrit_slack.events.change_events import ReviewerAddedEvent
from gerrit_slack.notifications.generators.base import BaseMessageGenerator
from gerrit_slack.notifications.policy import REVIEWER_ADDED_POLICY
from gerrit_slack.notifications.template import MessageFields


class ReviewerAddedMessageGenerator(BaseMessageGenerator):
    """Names the added reviewer as the actor."""

    policy = REVIEWER_ADDED_POLICY
    action = "was added to review"

    _event: ReviewerAddedEvent

    def message_fields(self) -> MessageFields:
        return self._fields(
            self._event.reviewer,
            "reviewer",
            title=self._subject(),
        )
