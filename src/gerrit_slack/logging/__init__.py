"""Logging subpackage."""

from gerrit_slack.logging.config import configure_logging

__all__ = ["configure_logging"]
