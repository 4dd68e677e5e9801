# backend/patternbook/examples/structural/adapter.py
"""
Adapter - Legacy payment gateway

Q: Checkout expects a ``PaymentProcessor`` that takes dollar amounts, but
the only gateway you have is a legacy class that charges integer cents
through a differently named method. How do you use it without changing
either side?
"""

from abc import ABC, abstractmethod
from typing import List


class PaymentProcessor(ABC):
    """Target interface the checkout code expects"""

    @abstractmethod
    def pay(self, amount: float) -> bool:
        pass


class LegacyPaymentGateway:
    """Adaptee with an incompatible interface"""

    def __init__(self):
        self.charged_cents: List[int] = []

    def make_payment(self, cents: int) -> str:
        self.charged_cents.append(cents)
        receipt = f"LEGACY-{len(self.charged_cents):04d}"
        print(f"[LegacyGateway] charged {cents} cents, receipt {receipt}")
        return receipt


class PaymentAdapter(PaymentProcessor):
    def __init__(self, gateway: LegacyPaymentGateway):
        self.gateway = gateway

    def pay(self, amount: float) -> bool:
        if amount <= 0:
            print(f"Refusing non-positive amount {amount}")
            return False
        cents = int(round(amount * 100))
        receipt = self.gateway.make_payment(cents)
        return receipt.startswith("LEGACY-")


def checkout(processor: PaymentProcessor, amount: float) -> bool:
    print(f"Checking out ${amount:.2f}")
    return processor.pay(amount)


def demo() -> dict:
    gateway = LegacyPaymentGateway()
    adapter = PaymentAdapter(gateway)
    paid = checkout(adapter, 49.99)
    refused = checkout(adapter, 0)
    return {"paid": paid, "refused": not refused, "charged_cents": gateway.charged_cents}
