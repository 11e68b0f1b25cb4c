"""Alert service backed by a pluggable notification channel."""

from dispatch.base import NotificationChannel


class AlertService:
    """Forward alerts to the channel it was built with.

    The channel is fixed at construction. Arguments are passed through
    untouched and anything the channel raises reaches the caller as-is.
    """

    def __init__(self, channel: NotificationChannel) -> None:
        self._channel = channel

    @property
    def channel(self) -> NotificationChannel:
        return self._channel

    def alert(self, recipient: str, issue: str) -> None:
        """Send ``issue`` to ``recipient`` through the configured channel."""
        self._channel.send(recipient, issue)
