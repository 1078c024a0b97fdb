# -*- coding: utf-8 -*-
"""Base message generator: one publish decision and one render per event."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Optional

import structlog

from gerrit_slack.config.project_config import ProjectConfig
from gerrit_slack.events.change_events import AccountAttribute, ChangeAttribute, ChangeEvent
from gerrit_slack.exceptions import EventAttributeMissingError, TemplateRenderError
from gerrit_slack.notifications.policy import PublishDecision, PublishPolicy
from gerrit_slack.notifications.template import MessageFields, MessageTemplate


def first_line(text: Optional[str]) -> Optional[str]:
    """Return text up to the first newline (the commit subject)."""
    if text is None:
        return None
    return text.split("\n", 1)[0]


class BaseMessageGenerator(ABC):
    """Pairs an event kind's PublishPolicy with its field mapping.

    Built for one (event, config) pair and discarded after use. Neither
    should_publish() nor generate() raises: policy problems are logged as
    warnings and rendering problems yield an empty message.
    """

    policy: ClassVar[PublishPolicy]
    action: ClassVar[str]

    def __init__(
        self,
        event: ChangeEvent,
        config: ProjectConfig,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """
        Args:
            event: Event to announce.
            config: Configuration of the event's project (read-only).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        if event is None:
            raise ValueError("event cannot be None")
        self._event = event
        self._config = config
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def event(self) -> ChangeEvent:
        return self._event

    @property
    def config(self) -> ProjectConfig:
        return self._config

    def decide(self) -> PublishDecision:
        """Evaluate the publish policy without logging."""
        return self.policy.evaluate(self._event, self._config)

    def should_publish(self) -> bool:
        """Whether the generated message should be published."""
        decision = self.decide()
        for warning in decision.warnings:
            self._logger.warning(
                "publish_rule_degraded",
                event_type=type(self._event).__name__,
                warning=warning,
            )
        self._logger.debug(
            "publish_decision",
            event_type=type(self._event).__name__,
            should_publish=decision.should_publish,
            reason=decision.reason,
        )
        return decision.should_publish

    def generate(self) -> str:
        """Render the event's message; empty string if it cannot be built."""
        try:
            return MessageTemplate(self.message_fields()).render()
        except EventAttributeMissingError as exc:
            self._logger.error(
                "message_generation_failed",
                event_type=type(self._event).__name__,
                missing_attribute=exc.attribute,
            )
        except TemplateRenderError as exc:
            self._logger.error(
                "message_render_failed",
                event_type=type(self._event).__name__,
                resource=exc.resource,
                error_message=str(exc),
            )
        except Exception as exc:
            self._logger.error(
                "message_generation_unexpected_error",
                event_type=type(self._event).__name__,
                error_type=type(exc).__name__,
                error_message=str(exc),
                exc_info=True,
            )
        return ""

    @abstractmethod
    def message_fields(self) -> MessageFields:
        """Map the event onto template fields.

        Raises:
            EventAttributeMissingError: If a required nested attribute is missing.
        """
        ...

    def _change(self) -> ChangeAttribute:
        if self._event.change is None:
            raise EventAttributeMissingError("change")
        return self._event.change

    def _subject(self) -> Optional[str]:
        """First line of the commit message, or the change subject when the message is missing."""
        change = self._change()
        if change.commit_message is None:
            return change.subject
        return first_line(change.commit_message)

    def _fields(
        self,
        actor: Optional[AccountAttribute],
        actor_attribute: str,
        *,
        title: Optional[str] = None,
        message: Optional[str] = None,
    ) -> MessageFields:
        """Build MessageFields for the acting account and the event's change."""
        if actor is None:
            raise EventAttributeMissingError(actor_attribute)
        change = self._change()
        return MessageFields(
            channel=self._config.channel,
            name=actor.name,
            action=self.action,
            number=change.number,
            project=change.project,
            branch=change.branch,
            url=change.url,
            title=title,
            message=message,
        )
