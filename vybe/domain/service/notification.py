"""Notification collaborator interface."""

import logfire

from vybe.domain.value import Notice


class Notifier:
    """Receives user-visible notices (toasts, banners, telemetry).

    Delivery is fire-and-forget: callers never wait on or inspect the
    outcome.
    """

    def notify(self, notice: Notice) -> None:
        """Publish a notice.

        Args:
            notice: Notice to show
        """
        raise NotImplementedError


def send_notice(notifier: Notifier, notice: Notice) -> None:
    """Deliver a notice without letting the notifier affect the caller.

    Args:
        notifier: Notification collaborator
        notice: Notice to deliver
    """
    try:
        notifier.notify(notice)
    except Exception as e:
        logfire.error(
            "Notice delivery failed",
            title=notice.title,
            level=notice.level.value,
            error=str(e),
        )
