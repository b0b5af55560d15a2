import pytest

from structural_demo.patterns.payment import (
    CURRENCY,
    PaymentProcessor,
    PayPalPaymentProcessor,
    QiwiPaymentAdapter,
    QiwiPaymentSystem,
    StripePaymentAdapter,
    StripePaymentService,
)

def make_processors(output):
    return {
        "PayPal": PayPalPaymentProcessor(output),
        "Stripe": StripePaymentAdapter(StripePaymentService(output)),
        "Qiwi": QiwiPaymentAdapter(QiwiPaymentSystem(output)),
    }

def test_all_processors_share_the_contract():
    for processor in make_processors(print).values():
        assert isinstance(processor, PaymentProcessor)

@pytest.mark.parametrize("name", ["PayPal", "Stripe", "Qiwi"])
def test_process_reports_backend_and_amount(name):
    lines = []
    make_processors(lines.append)[name].process(4200)

    assert len(lines) == 1
    assert lines[0].startswith(f"[{name}]")
    assert "4200" in lines[0]
    assert CURRENCY in lines[0]

def test_default_output_is_stdout(capsys):
    PayPalPaymentProcessor().process(5000)
    StripePaymentAdapter(StripePaymentService()).process(7500)
    QiwiPaymentAdapter(QiwiPaymentSystem()).process(3000)

    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"[PayPal] Processing payment of 5000 {CURRENCY}...",
        f"[Stripe] Transaction completed: 7500 {CURRENCY}",
        f"[Qiwi] Payment successful: 3000 {CURRENCY}",
    ]

def test_stripe_adapter_forwards_to_make_transaction():
    calls = []

    class RecordingStripe(StripePaymentService):
        def make_transaction(self, total_amount):
            calls.append(total_amount)

    StripePaymentAdapter(RecordingStripe()).process(7500)
    assert calls == [7500]

def test_qiwi_adapter_forwards_to_pay():
    calls = []

    class RecordingQiwi(QiwiPaymentSystem):
        def pay(self, amount):
            calls.append(amount)

    QiwiPaymentAdapter(RecordingQiwi()).process(3000)
    assert calls == [3000]

@pytest.mark.parametrize("amount", [0, -100, 12.5])
def test_amount_is_not_validated(amount):
    lines = []
    for processor in make_processors(lines.append).values():
        processor.process(amount)

    assert len(lines) == 3
    assert all(str(amount) in line for line in lines)

def test_custom_currency():
    lines = []
    PayPalPaymentProcessor(lines.append, currency="USD").process(10)
    assert lines == ["[PayPal] Processing payment of 10 USD..."]

def test_adapters_accept_any_matching_service():
    calls = []

    class LegacyStripe:
        def make_transaction(self, total_amount):
            calls.append(("stripe", total_amount))

    class LegacyQiwi:
        def pay(self, amount):
            calls.append(("qiwi", amount))

    StripePaymentAdapter(LegacyStripe()).process(1)
    QiwiPaymentAdapter(LegacyQiwi()).process(2)
    assert calls == [("stripe", 1), ("qiwi", 2)]
