"""
Abstract Factory - Themed UI widgets

Q: A settings screen must render buttons and checkboxes that always match
each other (all light or all dark). How do you create families of related
objects without naming their concrete classes?
"""

from abc import ABC, abstractmethod
from typing import List


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class LightButton(Button):
    def render(self) -> str:
        return "[ OK ] (light button)"


class DarkButton(Button):
    def render(self) -> str:
        return "[ OK ] (dark button)"


class LightCheckbox(Checkbox):
    def render(self) -> str:
        return "[x] (light checkbox)"


class DarkCheckbox(Checkbox):
    def render(self) -> str:
        return "[x] (dark checkbox)"


class WidgetFactory(ABC):
    theme: str = ""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class LightThemeFactory(WidgetFactory):
    theme = "light"

    def create_button(self) -> Button:
        return LightButton()

    def create_checkbox(self) -> Checkbox:
        return LightCheckbox()


class DarkThemeFactory(WidgetFactory):
    theme = "dark"

    def create_button(self) -> Button:
        return DarkButton()

    def create_checkbox(self) -> Checkbox:
        return DarkCheckbox()


class SettingsScreen:
    """Client code: only knows the abstract factory and products"""

    def __init__(self, factory: WidgetFactory):
        self.factory = factory

    def render(self) -> List[str]:
        widgets = [self.factory.create_button(), self.factory.create_checkbox()]
        rendered = [w.render() for w in widgets]
        for line in rendered:
            print(line)
        return rendered


def demo() -> dict:
    result = {}
    for factory in (LightThemeFactory(), DarkThemeFactory()):
        print(f"Rendering {factory.theme} theme:")
        result[factory.theme] = SettingsScreen(factory).render()
    return result
