from abc import ABC, abstractmethod
from typing import Callable

CURRENCY = "тг"


class PaymentProcessor(ABC):
    @abstractmethod
    def process(self, amount) -> None:
        pass


class PayPalPaymentProcessor(PaymentProcessor):
    def __init__(self, output: Callable[[str], None] = print, currency: str = CURRENCY) -> None:
        self._output = output
        self.currency = currency

    def process(self, amount) -> None:
        self._output(f"[PayPal] Processing payment of {amount} {self.currency}...")


# Third-party services with their own interfaces
class StripePaymentService:
    def __init__(self, output: Callable[[str], None] = print, currency: str = CURRENCY) -> None:
        self._output = output
        self.currency = currency

    def make_transaction(self, total_amount) -> None:
        self._output(f"[Stripe] Transaction completed: {total_amount} {self.currency}")


class QiwiPaymentSystem:
    def __init__(self, output: Callable[[str], None] = print, currency: str = CURRENCY) -> None:
        self._output = output
        self.currency = currency

    def pay(self, amount) -> None:
        self._output(f"[Qiwi] Payment successful: {amount} {self.currency}")


# Adapters
class StripePaymentAdapter(PaymentProcessor):
    def __init__(self, stripe_service: StripePaymentService) -> None:
        self._stripe_service = stripe_service

    def process(self, amount) -> None:
        self._stripe_service.make_transaction(amount)


class QiwiPaymentAdapter(PaymentProcessor):
    def __init__(self, qiwi_system: QiwiPaymentSystem) -> None:
        self._qiwi_system = qiwi_system

    def process(self, amount) -> None:
        self._qiwi_system.pay(amount)
