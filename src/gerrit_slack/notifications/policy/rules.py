# -*- coding: utf-8 -*-
"""Publish rules shared by the per-kind policies (pure logic, no I/O).

A rule inspects (event, config) and returns a RuleOutcome. A rule that cannot
be evaluated raises PolicyEvaluationError; PublishPolicy turns that into a
warning and moves on to the next rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import (
    ChangeAttribute,
    ChangeEvent,
    ChangeKind,
    PatchSetAttribute,
)
from gerrit_slack.exceptions import PolicyEvaluationError


@dataclass(frozen=True)
class RuleOutcome:
    """Result of one rule (suppress or not + reason for logging)."""

    suppress: bool
    reason: str
    warning: Optional[str] = None
    """Set when the rule passed but saw something worth logging."""


PublishRule = Callable[[ChangeEvent, ProjectConfig], RuleOutcome]

UNCHANGED_CHANGE_KINDS = frozenset(
    {
        ChangeKind.TRIVIAL_REBASE,
        ChangeKind.MERGE_FIRST_PARENT_UPDATE,
        ChangeKind.NO_CODE_CHANGE,
        ChangeKind.NO_CHANGE,
    }
)


def _proceed(reason: str, warning: Optional[str] = None) -> RuleOutcome:
    return RuleOutcome(suppress=False, reason=reason, warning=warning)


def _suppress(reason: str) -> RuleOutcome:
    return RuleOutcome(suppress=True, reason=reason)


def _require_change(event: ChangeEvent) -> ChangeAttribute:
    if event.change is None:
        raise PolicyEvaluationError("change attribute is missing")
    return event.change


def classify_change_kind(raw: Optional[str]) -> Optional[ChangeKind]:
    """Return the ChangeKind for a raw value, or None when it is not recognized."""
    if raw is None:
        return None
    try:
        return ChangeKind(str(raw).upper())
    except ValueError:
        return None


def enabled(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    """Suppress everything when notifications are disabled for the project."""
    if not config.enabled:
        return _suppress("notifications disabled")
    return _proceed("notifications enabled")


def kind_toggle(toggle: str) -> PublishRule:
    """Build a rule that suppresses when the boolean config field `toggle` is off."""

    def _rule(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
        if not getattr(config, toggle):
            return _suppress(f"{toggle} is off")
        return _proceed(f"{toggle} is on")

    _rule.__name__ = toggle
    return _rule


def unchanged_patch_set(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    """Suppress rebases and patch sets without code changes.

    An unrecognized change kind counts as changed.
    """
    if not config.ignore_unchanged_patch_set:
        return _proceed("unchanged patch sets are published")
    patch_set: Optional[PatchSetAttribute] = getattr(event, "patch_set", None)
    if patch_set is None:
        raise PolicyEvaluationError("patch set attribute is missing")

    kind = classify_change_kind(patch_set.kind)
    if kind is None:
        return _proceed(
            "change kind not recognized, treated as changed",
            warning=f"unknown change kind {patch_set.kind!r}",
        )
    if kind in UNCHANGED_CHANGE_KINDS:
        return _suppress(f"unchanged patch set (kind={kind.value})")
    return _proceed(f"patch set changed (kind={kind.value})")


def private_change(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    if not config.ignore_private_patch_set:
        return _proceed("private changes are published")
    if _require_change(event).is_private is True:
        return _suppress("change is private")
    return _proceed("change is not private")


def work_in_progress(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    if not config.ignore_wip_patch_set:
        return _proceed("work-in-progress changes are published")
    if _require_change(event).wip is True:
        return _suppress("change is work-in-progress")
    return _proceed("change is not work-in-progress")


def still_private(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    """Only announce the private -> public transition."""
    if _require_change(event).is_private is True:
        return _suppress("change is still private")
    return _proceed("change was made public")


def still_work_in_progress(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    """Only announce the work-in-progress -> ready transition."""
    if _require_change(event).wip is True:
        return _suppress("change is still work-in-progress")
    return _proceed("change is ready for review")


def ignore_pattern(event: ChangeEvent, config: ProjectConfig) -> RuleOutcome:
    """Suppress when the whole commit message matches the configured pattern.

    The pattern is compiled with DOTALL and must match the entire message.
    No pattern means the rule does not apply.
    """
    pattern = config.ignore
    if not pattern:
        return _proceed("no ignore pattern configured")
    try:
        compiled = re.compile(pattern, re.DOTALL)
    except re.error as exc:
        raise PolicyEvaluationError(f"invalid ignore pattern {pattern!r}: {exc}") from exc

    commit_message = _require_change(event).commit_message
    if commit_message is None:
        raise PolicyEvaluationError("commit message is missing")
    if compiled.fullmatch(commit_message):
        return _suppress(f"commit message matches ignore pattern {pattern!r}")
    return _proceed("commit message does not match ignore pattern")
