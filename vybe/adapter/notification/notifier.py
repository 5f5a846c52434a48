"""Notifier implementations."""

import logfire

from vybe.domain.service import Notifier
from vybe.domain.value import Notice, NoticeLevel


class LogfireNotifier(Notifier):
    """Routes notices to the structured log.

    Used where there is no toast surface, e.g. scripts and workers.
    """

    def notify(self, notice: Notice) -> None:
        """Log a notice at a level matching its severity."""
        if notice.level == NoticeLevel.ERROR:
            logfire.error(
                "Notice: {title}", title=notice.title, description=notice.description
            )
        else:
            logfire.info(
                "Notice: {title}",
                title=notice.title,
                description=notice.description,
                level=notice.level.value,
            )


class MockNotifier(Notifier):
    """Mock notifier for testing; keeps every notice it receives."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)

    def titles(self) -> list[str]:
        return [notice.title for notice in self.notices]
