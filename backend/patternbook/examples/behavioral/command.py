"""
Command - Light switch with undo

Q: A remote should trigger actions without knowing how they are performed,
and every action should be undoable. How do you turn a request into an
object?
"""

from abc import ABC, abstractmethod
from typing import List


class Light:
    """Receiver"""

    def __init__(self, room: str):
        self.room = room
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        print(f"{self.room} light is ON")

    def turn_off(self) -> None:
        self.is_on = False
        print(f"{self.room} light is OFF")


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_on()

    def undo(self) -> None:
        self.light.turn_off()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_off()

    def undo(self) -> None:
        self.light.turn_on()


class RemoteInvoker:
    def __init__(self):
        self.history: List[Command] = []

    def press(self, command: Command) -> None:
        command.execute()
        self.history.append(command)

    def undo(self) -> bool:
        """Undo the most recent command; False when there is nothing to undo"""
        if not self.history:
            print("Nothing to undo")
            return False
        self.history.pop().undo()
        return True


def demo() -> dict:
    kitchen = Light("Kitchen")
    remote = RemoteInvoker()

    remote.press(LightOnCommand(kitchen))
    remote.press(LightOffCommand(kitchen))
    remote.undo()
    after_one_undo = kitchen.is_on
    remote.undo()
    extra_undo = remote.undo()

    return {"after_one_undo": after_one_undo, "final": kitchen.is_on, "extra_undo": extra_undo}
