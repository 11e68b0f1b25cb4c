"""Configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Demo run settings."""

    log_level: str = "INFO"
    alert_email_recipient: str = "ops@company.com"
    alert_email_issue: str = "CPU usage at 95%"
    alert_chat_recipient: str = "#incidents"
    alert_chat_issue: str = "Database connection pool exhausted"
    payment_gateway_name: str = "card"
    checkout_amount: float = 49.99
