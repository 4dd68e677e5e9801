"""
Memento - Text editor undo

Q: How do you capture an editor's state so it can be restored later
without exposing the editor's internals to the undo history?
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class EditorMemento:
    content: str
    cursor: int


class TextEditor:
    """Originator"""

    def __init__(self):
        self._content = ""
        self._cursor = 0

    @property
    def content(self) -> str:
        return self._content

    def write(self, text: str) -> None:
        self._content = self._content[: self._cursor] + text + self._content[self._cursor :]
        self._cursor += len(text)

    def save(self) -> EditorMemento:
        return EditorMemento(self._content, self._cursor)

    def restore(self, memento: EditorMemento) -> None:
        self._content = memento.content
        self._cursor = memento.cursor


class History:
    """Caretaker: stores mementos but never looks inside them"""

    def __init__(self):
        self._snapshots: List[EditorMemento] = []

    def backup(self, editor: TextEditor) -> None:
        self._snapshots.append(editor.save())

    def undo(self, editor: TextEditor) -> bool:
        if not self._snapshots:
            print("No snapshot to restore")
            return False
        editor.restore(self._snapshots.pop())
        print(f"Restored: {editor.content!r}")
        return True


def demo() -> List[str]:
    editor = TextEditor()
    history = History()
    states = []

    history.backup(editor)
    editor.write("Hello")
    history.backup(editor)
    editor.write(", World")
    print(f"Current: {editor.content!r}")
    states.append(editor.content)

    history.undo(editor)
    states.append(editor.content)
    history.undo(editor)
    states.append(editor.content)
    return states
