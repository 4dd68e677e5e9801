"""
Bridge - Remote controls and devices

Q: You have basic and advanced remotes, and TVs and radios. How do you
avoid a class for every remote/device combination?
"""

from abc import ABC, abstractmethod


class Device(ABC):
    """Implementation side of the bridge"""

    name: str = "device"

    def __init__(self):
        self._enabled = False
        self._volume = 30

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True
        print(f"{self.name} is on")

    def disable(self) -> None:
        self._enabled = False
        print(f"{self.name} is off")

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int) -> None:
        self._volume = max(0, min(100, volume))
        print(f"{self.name} volume set to {self._volume}")

    @abstractmethod
    def status(self) -> str:
        pass


class TV(Device):
    name = "TV"

    def status(self) -> str:
        return f"TV enabled={self._enabled} volume={self._volume}"


class Radio(Device):
    name = "Radio"

    def status(self) -> str:
        return f"Radio enabled={self._enabled} volume={self._volume}"


class RemoteControl:
    """Abstraction side: holds a reference to any Device"""

    VOLUME_STEP = 10

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_up(self) -> None:
        self.device.set_volume(self.device.get_volume() + self.VOLUME_STEP)

    def volume_down(self) -> None:
        self.device.set_volume(self.device.get_volume() - self.VOLUME_STEP)


class AdvancedRemoteControl(RemoteControl):
    def mute(self) -> None:
        self.device.set_volume(0)


def demo() -> dict:
    tv_remote = RemoteControl(TV())
    tv_remote.toggle_power()
    tv_remote.volume_up()

    radio_remote = AdvancedRemoteControl(Radio())
    radio_remote.toggle_power()
    radio_remote.mute()

    return {"tv": tv_remote.device.status(), "radio": radio_remote.device.status()}
