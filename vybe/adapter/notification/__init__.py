"""Notification adapter."""

from .notifier import LogfireNotifier, MockNotifier

__all__ = ["LogfireNotifier", "MockNotifier"]
