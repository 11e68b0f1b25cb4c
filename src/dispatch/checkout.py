"""Checkout service backed by a pluggable payment gateway."""

from dispatch.base import PaymentGateway


class CheckoutService:
    """Hand checkout amounts to the gateway it was built with."""

    def __init__(self, gateway: PaymentGateway) -> None:
        self._gateway = gateway

    @property
    def gateway(self) -> PaymentGateway:
        return self._gateway

    def checkout(self, amount: float) -> None:
        # No currency or bounds checks; the gateway owns validation.
        self._gateway.initiate(amount)
