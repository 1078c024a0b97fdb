"""Message generators, one per change event kind."""

from gerrit_slack.notifications.generators.base import BaseMessageGenerator, first_line
from gerrit_slack.notifications.generators.change_merged import ChangeMergedMessageGenerator
from gerrit_slack.notifications.generators.factory import new_generator, supported_event_types
from gerrit_slack.notifications.generators.patch_set_created import (
    PatchSetCreatedMessageGenerator,
)
from gerrit_slack.notifications.generators.reviewer_added import ReviewerAddedMessageGenerator
from gerrit_slack.notifications.generators.state_changed import (
    PrivateStateChangedMessageGenerator,
    WorkInProgressStateChangedMessageGenerator,
)

__all__ = [
    "BaseMessageGenerator",
    "ChangeMergedMessageGenerator",
    "PatchSetCreatedMessageGenerator",
    "PrivateStateChangedMessageGenerator",
    "ReviewerAddedMessageGenerator",
    "WorkInProgressStateChangedMessageGenerator",
    "first_line",
    "new_generator",
    "supported_event_types",
]
