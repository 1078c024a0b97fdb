# -*- coding: utf-8 -*-
"""Parse Gerrit `stream-events` JSON objects into change events.

Only the event types that have a notification are mapped; every other
stream event type (comment-added, ref-updated, ...) yields None.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from gerrit_slack.events.change_events import (
    AccountAttribute,
    ChangeAttribute,
    ChangeEvent,
    ChangeMergedEvent,
    PatchSetAttribute,
    PatchSetCreatedEvent,
    PrivateStateChangedEvent,
    ReviewerAddedEvent,
    WorkInProgressStateChangedEvent,
)


def _account(raw: Any) -> Optional[AccountAttribute]:
    if not isinstance(raw, dict):
        return None
    return AccountAttribute(
        name=raw.get("name"),
        email=raw.get("email"),
        username=raw.get("username"),
    )


def _change(raw: Any) -> Optional[ChangeAttribute]:
    if not isinstance(raw, dict):
        return None
    return ChangeAttribute(
        number=int(raw.get("number") or 0),
        project=str(raw.get("project") or ""),
        branch=str(raw.get("branch") or ""),
        url=str(raw.get("url") or ""),
        subject=raw.get("subject"),
        commit_message=raw.get("commitMessage"),
        is_private=raw.get("private"),
        wip=raw.get("wip"),
    )


def _patch_set(raw: Any) -> Optional[PatchSetAttribute]:
    if not isinstance(raw, dict):
        return None
    number = raw.get("number")
    return PatchSetAttribute(
        number=int(number) if number is not None else None,
        revision=raw.get("revision"),
        kind=raw.get("kind"),
    )


def _patchset_created(data: dict[str, Any]) -> ChangeEvent:
    return PatchSetCreatedEvent(
        change=_change(data.get("change")),
        uploader=_account(data.get("uploader")),
        patch_set=_patch_set(data.get("patchSet")),
    )


def _change_merged(data: dict[str, Any]) -> ChangeEvent:
    return ChangeMergedEvent(
        change=_change(data.get("change")),
        submitter=_account(data.get("submitter")),
    )


def _reviewer_added(data: dict[str, Any]) -> ChangeEvent:
    return ReviewerAddedEvent(
        change=_change(data.get("change")),
        reviewer=_account(data.get("reviewer")),
    )


def _private_state_changed(data: dict[str, Any]) -> ChangeEvent:
    return PrivateStateChangedEvent(
        change=_change(data.get("change")),
        changer=_account(data.get("changer")),
    )


def _wip_state_changed(data: dict[str, Any]) -> ChangeEvent:
    return WorkInProgressStateChangedEvent(
        change=_change(data.get("change")),
        changer=_account(data.get("changer")),
    )


_PARSERS: dict[str, Callable[[dict[str, Any]], ChangeEvent]] = {
    "patchset-created": _patchset_created,
    "change-merged": _change_merged,
    "reviewer-added": _reviewer_added,
    "private-state-changed": _private_state_changed,
    "wip-state-changed": _wip_state_changed,
}


def parse_stream_event(data: dict[str, Any]) -> Optional[ChangeEvent]:
    """Build a change event from one decoded stream-events line.

    Args:
        data: Decoded JSON object; its "type" selects the event class.

    Returns:
        The event, or None when the type has no notification.

    Raises:
        pydantic.ValidationError: If the change block has malformed values.
    """
    parser = _PARSERS.get(str(data.get("type", "")))
    if parser is None:
        return None
    return parser(data)
