# -*- coding: utf-8 -*-
"""PublishPolicy: ordered rule chain deciding whether an event is announced.

No I/O. Rules run in order and the first suppression wins. A rule that
cannot be evaluated never blocks publishing: it is recorded as a warning
and the next rule runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import ChangeEvent
from gerrit_slack.exceptions import PolicyEvaluationError
from gerrit_slack.notifications.policy import rules
from gerrit_slack.notifications.policy.rules import PublishRule


@dataclass(frozen=True)
class PublishDecision:
    """Result of PublishPolicy evaluation (decision + reason for logging)."""

    should_publish: bool
    reason: str
    warnings: tuple[str, ...] = ()
    """Rules that could not be evaluated or reported something unusual."""


class PublishPolicy:
    """Pure policy: evaluates the rule chain of one event kind."""

    def __init__(self, rule_chain: Sequence[tuple[str, PublishRule]]) -> None:
        """
        Args:
            rule_chain: (name, rule) pairs in evaluation order. The name
                prefixes reasons and warnings.
        """
        self._rules = tuple(rule_chain)

    @property
    def rule_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._rules)

    def evaluate(self, event: ChangeEvent, config: ProjectConfig) -> PublishDecision:
        """Return PublishDecision (should_publish + reason + warnings).

        Args:
            event: Event being considered.
            config: Project configuration (read-only).
        """
        warnings: list[str] = []
        for name, rule in self._rules:
            try:
                outcome = rule(event, config)
            except PolicyEvaluationError as exc:
                warnings.append(f"{name}: {exc}")
                continue
            except Exception as exc:
                warnings.append(f"{name}: {type(exc).__name__}: {exc}")
                continue

            if outcome.warning:
                warnings.append(f"{name}: {outcome.warning}")
            if outcome.suppress:
                return PublishDecision(
                    should_publish=False,
                    reason=f"{name}: {outcome.reason}",
                    warnings=tuple(warnings),
                )

        return PublishDecision(
            should_publish=True,
            reason="no suppression rule matched",
            warnings=tuple(warnings),
        )


PATCH_SET_CREATED_POLICY = PublishPolicy(
    [
        ("enabled", rules.enabled),
        ("publish_on_patch_set_created", rules.kind_toggle("publish_on_patch_set_created")),
        ("ignore_unchanged_patch_set", rules.unchanged_patch_set),
        ("ignore_private_patch_set", rules.private_change),
        ("ignore_wip_patch_set", rules.work_in_progress),
        ("ignore", rules.ignore_pattern),
    ]
)

CHANGE_MERGED_POLICY = PublishPolicy(
    [
        ("enabled", rules.enabled),
        ("publish_on_change_merged", rules.kind_toggle("publish_on_change_merged")),
    ]
)

REVIEWER_ADDED_POLICY = PublishPolicy(
    [
        ("enabled", rules.enabled),
        ("publish_on_reviewer_added", rules.kind_toggle("publish_on_reviewer_added")),
        ("ignore_private_patch_set", rules.private_change),
        ("ignore_wip_patch_set", rules.work_in_progress),
    ]
)

PRIVATE_STATE_CHANGED_POLICY = PublishPolicy(
    [
        ("enabled", rules.enabled),
        ("publish_on_private_to_public", rules.kind_toggle("publish_on_private_to_public")),
        ("still_private", rules.still_private),
    ]
)

WORK_IN_PROGRESS_STATE_CHANGED_POLICY = PublishPolicy(
    [
        ("enabled", rules.enabled),
        ("publish_on_wip_ready", rules.kind_toggle("publish_on_wip_ready")),
        ("still_work_in_progress", rules.still_work_in_progress),
    ]
)
