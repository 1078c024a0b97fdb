"""Dependency injection."""

from gerrit_slack.DI.container import Container

__all__ = ["Container"]
