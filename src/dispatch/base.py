"""Abstract capabilities the dispatch services delegate to."""

from abc import ABC, abstractmethod


class NotificationChannel(ABC):
    """Base class for notification channels."""

    @abstractmethod
    def send(self, recipient: str, message: str) -> None:
        """Deliver a message to the given recipient."""


class PaymentGateway(ABC):
    """Base class for payment gateways."""

    @abstractmethod
    def initiate(self, amount: float) -> None:
        """Start a payment for the given amount."""
