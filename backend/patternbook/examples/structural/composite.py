# backend/patternbook/examples/structural/composite.py
"""
Composite - File system tree

Q: Files and folders should be handled the same way: both have a size and
both can be searched, but a folder's size is the total of everything inside
it. How do you treat individual objects and compositions uniformly?
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class FileSystemComponent(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def find(self, name: str) -> Optional["FileSystemComponent"]:
        pass

    @abstractmethod
    def display(self, indent: int = 0) -> List[str]:
        pass


class File(FileSystemComponent):
    """Leaf"""

    def __init__(self, name: str, size_bytes: int):
        super().__init__(name)
        if size_bytes < 0:
            raise ValueError(f"File size cannot be negative: {size_bytes}")
        self.size_bytes = size_bytes

    def size(self) -> int:
        return self.size_bytes

    def find(self, name: str) -> Optional[FileSystemComponent]:
        return self if self.name == name else None

    def display(self, indent: int = 0) -> List[str]:
        line = f"{'  ' * indent}- {self.name} ({self.size_bytes} bytes)"
        print(line)
        return [line]


class Folder(FileSystemComponent):
    """Composite: size and find recurse through children"""

    def __init__(self, name: str, children: Optional[List[FileSystemComponent]] = None):
        super().__init__(name)
        self.children: List[FileSystemComponent] = list(children or [])

    def add(self, component: FileSystemComponent) -> "Folder":
        self.children.append(component)
        return self

    def remove(self, component: FileSystemComponent) -> None:
        self.children.remove(component)

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def find(self, name: str) -> Optional[FileSystemComponent]:
        # depth-first, first match wins
        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def display(self, indent: int = 0) -> List[str]:
        line = f"{'  ' * indent}+ {self.name}/ ({self.size()} bytes)"
        print(line)
        lines = [line]
        for child in self.children:
            lines.extend(child.display(indent + 1))
        return lines


def demo() -> dict:
    root = Folder("project")
    src = Folder("src").add(File("main.py", 1200)).add(File("utils.py", 800))
    docs = Folder("docs").add(File("README.md", 400))
    root.add(src).add(docs).add(Folder("empty"))

    root.display()
    found = root.find("utils.py")
    print(f"Found utils.py: {found is not None}")
    return {
        "total_size": root.size(),
        "src_size": src.size(),
        "found": found.name if found else None,
        "missing": root.find("nope.txt"),
    }
