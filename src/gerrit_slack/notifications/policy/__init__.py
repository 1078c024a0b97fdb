"""Publish policies: ordered suppression rules per event kind (pure logic, no I/O)."""

from gerrit_slack.notifications.policy.publish_policy import (
    CHANGE_MERGED_POLICY,
    PATCH_SET_CREATED_POLICY,
    PRIVATE_STATE_CHANGED_POLICY,
    REVIEWER_ADDED_POLICY,
    WORK_IN_PROGRESS_STATE_CHANGED_POLICY,
    PublishDecision,
    PublishPolicy,
)
from gerrit_slack.notifications.policy.rules import (
    UNCHANGED_CHANGE_KINDS,
    PublishRule,
    RuleOutcome,
    classify_change_kind,
)

__all__ = [
    "CHANGE_MERGED_POLICY",
    "PATCH_SET_CREATED_POLICY",
    "PRIVATE_STATE_CHANGED_POLICY",
    "REVIEWER_ADDED_POLICY",
    "UNCHANGED_CHANGE_KINDS",
    "WORK_IN_PROGRESS_STATE_CHANGED_POLICY",
    "PublishDecision",
    "PublishPolicy",
    "PublishRule",
    "RuleOutcome",
    "classify_change_kind",
]
