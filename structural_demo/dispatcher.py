import logging
from enum import Enum
from typing import Callable, Optional

from structural_demo.patterns.beverage import (
    Beverage,
    Caramel,
    Espresso,
    Latte,
    Milk,
    Mocha,
    Sugar,
    WhippedCream,
)
from structural_demo.patterns.payment import (
    CURRENCY,
    PayPalPaymentProcessor,
    PaymentProcessor,
    QiwiPaymentAdapter,
    QiwiPaymentSystem,
    StripePaymentAdapter,
    StripePaymentService,
)
from structural_demo.receipt import Receipt


MENU = (
    "=== Structural patterns demo ===\n"
    "1 - Cafe ordering system (Decorator)\n"
    "2 - Payment system (Adapter)"
)
PROMPT = "\nChoose a module: "
INVALID_CHOICE = "Invalid choice!"


class DispatcherState(Enum):
    AWAITING_CHOICE = "awaiting_choice"
    RUNNING_BEVERAGE_DEMO = "running_beverage_demo"
    RUNNING_PAYMENT_DEMO = "running_payment_demo"


class Dispatcher:
    """Reads one menu choice and runs the matching demo.

    Input and output are injected, so ``Dispatcher(read_line=lambda _: "1",
    output=lines.append)`` runs without a console.
    """

    def __init__(self, read_line: Optional[Callable[[str], str]] = None,
                 output: Callable[[str], None] = print, currency: str = CURRENCY) -> None:
        self.read_line = read_line or input
        self.output = output
        self.currency = currency
        self.state = DispatcherState.AWAITING_CHOICE

    def _read_choice(self) -> str:
        try:
            line = self.read_line(PROMPT)
        except EOFError:
            return ""
        return (line or "").rstrip("\r\n")

    def run(self) -> DispatcherState:
        self.output(MENU)
        choice = self._read_choice()
        logging.debug(f"Menu choice: {choice!r}")

        if choice == "1":
            self._transition(DispatcherState.RUNNING_BEVERAGE_DEMO)
            self.run_beverage_demo()
        elif choice == "2":
            self._transition(DispatcherState.RUNNING_PAYMENT_DEMO)
            self.run_payment_demo()
        else:
            logging.debug(f"Invalid menu choice {choice!r}, no demo was run")
            self.output(INVALID_CHOICE)
        return self.state

    def _transition(self, state: DispatcherState):
        logging.debug(f"{self.state.name} -> {state.name}")
        self.state = state

    def beverage_orders(self) -> list[Beverage]:
        return [
            Sugar(Milk(Espresso())),
            Caramel(WhippedCream(Latte())),
            Milk(Milk(Sugar(Mocha()))),
        ]

    def payment_processors(self) -> list[tuple[PaymentProcessor, int]]:
        return [
            (PayPalPaymentProcessor(self.output, self.currency), 5000),
            (StripePaymentAdapter(StripePaymentService(self.output, self.currency)), 7500),
            (QiwiPaymentAdapter(QiwiPaymentSystem(self.output, self.currency)), 3000),
        ]

    def run_beverage_demo(self) -> Receipt:
        self.output("\n=== Cafe: ordering system (Decorator pattern) ===")
        receipt = Receipt(self.currency)
        for drink in self.beverage_orders():
            self.output(f"{drink.get_description()} -> {drink.get_cost()} {self.currency}")
            receipt.add(drink)
        receipt.log_summary()
        return receipt

    def run_payment_demo(self):
        self.output("\n=== Online shop: payment system (Adapter pattern) ===")
        for processor, amount in self.payment_processors():
            processor.process(amount)
