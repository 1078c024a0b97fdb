"""Custom exceptions for the notification pipeline."""

from __future__ import annotations


class GerritSlackError(Exception):
    """Base exception for gerrit-slack errors."""

    pass


class MissingRequiredConfigError(GerritSlackError):
    """Raised when a required configuration value is missing."""

    pass


class UnsupportedEventKindError(GerritSlackError):
    """Raised when no message generator is registered for an event type.

    Indicates an event kind was wired into the event source without a
    matching generator.
    """

    def __init__(self, event_type: str) -> None:
        super().__init__(f"No message generator registered for {event_type}")
        self.event_type = event_type


class EventAttributeMissingError(GerritSlackError):
    """Raised when an event lacks a nested attribute required to build a message."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"Event attribute is missing: {attribute}")
        self.attribute = attribute


class PolicyEvaluationError(GerritSlackError):
    """Raised by a publish rule that cannot be evaluated for the given event."""

    pass


class TemplateRenderError(GerritSlackError):
    """Raised when the message template cannot be loaded or substituted."""

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.resource = resource
        self.cause = cause
