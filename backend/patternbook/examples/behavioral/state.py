"""
State - Vending machine

Q: A vending machine behaves differently depending on whether a coin has
been inserted or it is sold out. How do you avoid a tangle of conditionals
by letting the behavior change with the state?
"""

from abc import ABC, abstractmethod


class MachineState(ABC):
    name: str = ""

    @abstractmethod
    def insert_coin(self, machine: "VendingMachine") -> bool:
        pass

    @abstractmethod
    def eject_coin(self, machine: "VendingMachine") -> bool:
        pass

    @abstractmethod
    def press_button(self, machine: "VendingMachine") -> bool:
        pass


class NoCoinState(MachineState):
    name = "no_coin"

    def insert_coin(self, machine: "VendingMachine") -> bool:
        print("Coin accepted")
        machine.state = machine.has_coin_state
        return True

    def eject_coin(self, machine: "VendingMachine") -> bool:
        print("No coin to eject")
        return False

    def press_button(self, machine: "VendingMachine") -> bool:
        print("Insert a coin first")
        return False


class HasCoinState(MachineState):
    name = "has_coin"

    def insert_coin(self, machine: "VendingMachine") -> bool:
        print("Coin already inserted")
        return False

    def eject_coin(self, machine: "VendingMachine") -> bool:
        print("Coin returned")
        machine.state = machine.no_coin_state
        return True

    def press_button(self, machine: "VendingMachine") -> bool:
        machine.release_item()
        machine.state = machine.no_coin_state if machine.stock > 0 else machine.sold_out_state
        return True


class SoldOutState(MachineState):
    name = "sold_out"

    def insert_coin(self, machine: "VendingMachine") -> bool:
        print("Sold out, coin returned")
        return False

    def eject_coin(self, machine: "VendingMachine") -> bool:
        print("No coin to eject")
        return False

    def press_button(self, machine: "VendingMachine") -> bool:
        print("Sold out")
        return False


class VendingMachine:
    def __init__(self, stock: int):
        self.no_coin_state = NoCoinState()
        self.has_coin_state = HasCoinState()
        self.sold_out_state = SoldOutState()

        self.stock = stock
        self.dispensed = 0
        self.state: MachineState = self.no_coin_state if stock > 0 else self.sold_out_state

    def insert_coin(self) -> bool:
        return self.state.insert_coin(self)

    def eject_coin(self) -> bool:
        return self.state.eject_coin(self)

    def press_button(self) -> bool:
        return self.state.press_button(self)

    def release_item(self) -> None:
        self.stock -= 1
        self.dispensed += 1
        print(f"Item dispensed ({self.stock} left)")


def demo() -> dict:
    machine = VendingMachine(stock=2)
    machine.press_button()
    for _ in range(3):
        machine.insert_coin()
        machine.press_button()
    return {"dispensed": machine.dispensed, "state": machine.state.name}
