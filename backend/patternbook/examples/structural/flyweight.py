"""
Flyweight - Trees in a forest

Q: A forest has a million trees but only a handful of species. How do you
avoid storing the same name, color and texture a million times?
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class TreeType:
    """Intrinsic state shared by every tree of the same kind"""
    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> str:
        return f"{self.name} ({self.color}) at ({x}, {y})"


class TreeFactory:
    def __init__(self):
        self._types: Dict[Tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in self._types:
            self._types[key] = TreeType(name, color, texture)
        return self._types[key]

    @property
    def type_count(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    """Extrinsic state: position only"""
    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self, factory: TreeFactory):
        self.factory = factory
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self) -> List[str]:
        return [tree.draw() for tree in self.trees]


def demo() -> dict:
    forest = Forest(TreeFactory())
    species = [("Oak", "green", "rough"), ("Pine", "dark green", "needles"), ("Birch", "white", "smooth")]
    for i in range(30):
        name, color, texture = species[i % len(species)]
        forest.plant_tree(i, i * 2, name, color, texture)

    for line in forest.draw()[:3]:
        print(line)
    print(f"{len(forest.trees)} trees share {forest.factory.type_count} tree types")
    return {"trees": len(forest.trees), "tree_types": forest.factory.type_count}
