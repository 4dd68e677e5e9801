# backend/patternbook/examples/behavioral/observer.py
"""
Observer - Stock ticker

Q: Several displays must update whenever a stock price changes, and new
displays should be attachable at runtime. How do you notify dependents
without coupling the stock to them?
"""

from abc import ABC, abstractmethod
from typing import List


class StockObserver(ABC):
    @abstractmethod
    def update(self, symbol: str, price: float) -> None:
        pass


class StockTicker:
    """Subject"""

    def __init__(self, symbol: str):
        self.symbol = symbol
        self._price = 0.0
        self._observers: List[StockObserver] = []

    def attach(self, observer: StockObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: StockObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self.symbol, self._price)

    @property
    def price(self) -> float:
        return self._price

    def set_price(self, price: float) -> None:
        print(f"{self.symbol} new price: {price:.2f}")
        self._price = price
        self.notify()


class PriceDisplay(StockObserver):
    def __init__(self, name: str):
        self.name = name
        self.seen: List[float] = []

    def update(self, symbol: str, price: float) -> None:
        self.seen.append(price)
        print(f"[{self.name}] {symbol} = {price:.2f}")


class PriceAlert(StockObserver):
    def __init__(self, threshold: float):
        self.threshold = threshold
        self.alerts: List[str] = []

    def update(self, symbol: str, price: float) -> None:
        if price >= self.threshold:
            alert = f"ALERT: {symbol} crossed {self.threshold:.2f}"
            self.alerts.append(alert)
            print(alert)


def demo() -> dict:
    ticker = StockTicker("ACME")
    display = PriceDisplay("dashboard")
    alert = PriceAlert(threshold=120.0)
    ticker.attach(display)
    ticker.attach(alert)

    ticker.set_price(100.0)
    ticker.set_price(125.5)
    ticker.detach(display)
    ticker.set_price(130.0)

    return {"display_seen": display.seen, "alerts": alert.alerts}
