"""
Decorator - Coffee add-ons

Q: Milk, mocha and whipped cream can be added to any coffee, in any
combination. How do you add responsibilities to an object dynamically
instead of creating a subclass per combination?
"""

from abc import ABC, abstractmethod


class Beverage(ABC):
    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class Espresso(Beverage):
    def cost(self) -> float:
        return 2.00

    def description(self) -> str:
        return "Espresso"


class HouseBlend(Beverage):
    def cost(self) -> float:
        return 1.50

    def description(self) -> str:
        return "House Blend"


class CondimentDecorator(Beverage):
    """Wraps a beverage and adds its own price and label"""

    price: float = 0.0
    label: str = ""

    def __init__(self, beverage: Beverage):
        self.beverage = beverage

    def cost(self) -> float:
        return round(self.beverage.cost() + self.price, 2)

    def description(self) -> str:
        return f"{self.beverage.description()}, {self.label}"


class Milk(CondimentDecorator):
    price = 0.50
    label = "Milk"


class Mocha(CondimentDecorator):
    price = 0.75
    label = "Mocha"


class WhippedCream(CondimentDecorator):
    price = 0.40
    label = "Whipped Cream"


def demo() -> list:
    orders = [
        Espresso(),
        Milk(HouseBlend()),
        WhippedCream(Mocha(Mocha(Espresso()))),
    ]
    receipt = []
    for order in orders:
        line = f"{order.description()}: ${order.cost():.2f}"
        print(line)
        receipt.append(line)
    return receipt
