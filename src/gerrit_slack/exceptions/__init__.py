"""Exceptions subpackage."""

from gerrit_slack.exceptions.exceptions import (
    EventAttributeMissingError,
    GerritSlackError,
    MissingRequiredConfigError,
    PolicyEvaluationError,
    TemplateRenderError,
    UnsupportedEventKindError,
)

__all__ = [
    "EventAttributeMissingError",
    "GerritSlackError",
    "MissingRequiredConfigError",
    "PolicyEvaluationError",
    "TemplateRenderError",
    "UnsupportedEventKindError",
]
