"""
Strategy - Shipping cost calculation

Q: Orders can ship standard, express or free, and the business keeps
adding options. How do you swap the cost algorithm without touching the
order code?
"""

from abc import ABC, abstractmethod
from typing import Dict


class ShippingStrategy(ABC):
    name: str = ""

    @abstractmethod
    def calculate(self, weight_kg: float) -> float:
        pass


class StandardShipping(ShippingStrategy):
    name = "standard"

    def calculate(self, weight_kg: float) -> float:
        return round(5.0 + 1.2 * weight_kg, 2)


class ExpressShipping(ShippingStrategy):
    name = "express"

    def calculate(self, weight_kg: float) -> float:
        return round(10.0 + 2.5 * weight_kg, 2)


class FreeShipping(ShippingStrategy):
    name = "free"

    def calculate(self, weight_kg: float) -> float:
        return 0.0


class ShippingCalculator:
    """Context: delegates to whatever strategy it currently holds"""

    def __init__(self, strategy: ShippingStrategy):
        self.strategy = strategy

    def set_strategy(self, strategy: ShippingStrategy) -> None:
        self.strategy = strategy

    def quote(self, weight_kg: float) -> float:
        if weight_kg < 0:
            raise ValueError(f"Weight cannot be negative: {weight_kg}")
        cost = self.strategy.calculate(weight_kg)
        print(f"{self.strategy.name} shipping for {weight_kg}kg: ${cost:.2f}")
        return cost


def demo() -> Dict[str, float]:
    calculator = ShippingCalculator(StandardShipping())
    quotes = {}
    for strategy in (StandardShipping(), ExpressShipping(), FreeShipping()):
        calculator.set_strategy(strategy)
        quotes[strategy.name] = calculator.quote(4.0)
    return quotes
