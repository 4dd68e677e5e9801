"""
Visitor - Shape operations

Q: You keep adding operations over a stable set of shapes (total area,
export descriptions). How do you add an operation without editing every
shape class?
"""

import math
from abc import ABC, abstractmethod
from typing import List


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: "Circle") -> None:
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle: "Rectangle") -> None:
        pass


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> None:
        pass


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_rectangle(self)


class AreaCalculator(ShapeVisitor):
    def __init__(self):
        self.total = 0.0

    def visit_circle(self, circle: Circle) -> None:
        self.total += math.pi * circle.radius ** 2

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self.total += rectangle.width * rectangle.height


class DescriptionExporter(ShapeVisitor):
    def __init__(self):
        self.lines: List[str] = []

    def visit_circle(self, circle: Circle) -> None:
        self.lines.append(f"<circle r={circle.radius}/>")

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self.lines.append(f"<rect w={rectangle.width} h={rectangle.height}/>")


def demo() -> dict:
    shapes: List[Shape] = [Circle(1.0), Rectangle(2.0, 3.0), Circle(0.5)]

    area = AreaCalculator()
    exporter = DescriptionExporter()
    for shape in shapes:
        shape.accept(area)
        shape.accept(exporter)

    print(f"Total area: {area.total:.2f}")
    for line in exporter.lines:
        print(line)
    return {"total_area": round(area.total, 4), "exported": exporter.lines}
