"""Illustrative wiring of the alert and checkout services."""

import logging

from dispatch.alert import AlertService
from dispatch.checkout import CheckoutService
from dispatch.config import Settings
from dispatch.console import LoggingNotificationChannel, LoggingPaymentGateway

logger = logging.getLogger(__name__)


def run(settings: Settings) -> None:
    """Send the demo alerts and run one checkout."""
    email_alert = AlertService(LoggingNotificationChannel("email"))
    email_alert.alert(settings.alert_email_recipient, settings.alert_email_issue)

    chat_alert = AlertService(LoggingNotificationChannel("slack"))
    chat_alert.alert(settings.alert_chat_recipient, settings.alert_chat_issue)

    checkout = CheckoutService(LoggingPaymentGateway(settings.payment_gateway_name))
    checkout.checkout(settings.checkout_amount)


def main() -> None:
    """Entry point for the dispatch demo."""
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Running dispatch demo")
    run(settings)
