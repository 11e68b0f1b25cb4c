"""Log-backed collaborators for running the services without real transports."""

import logging

from dispatch.base import NotificationChannel, PaymentGateway

logger = logging.getLogger(__name__)


class LoggingNotificationChannel(NotificationChannel):
    """Write alerts to the log instead of delivering them."""

    def __init__(self, name: str) -> None:
        self.name = name

    def send(self, recipient: str, message: str) -> None:
        logger.info("[%s] alert to %s: %s", self.name, recipient, message)


class LoggingPaymentGateway(PaymentGateway):
    """Write payment requests to the log instead of charging anyone."""

    def __init__(self, name: str) -> None:
        self.name = name

    def initiate(self, amount: float) -> None:
        logger.info("[%s] initiating payment of %.2f", self.name, amount)
