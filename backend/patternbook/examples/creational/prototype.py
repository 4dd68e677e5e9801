"""
Prototype - Document templates

Q: Setting up a report document takes many steps. How do you produce new
documents by copying a preconfigured one instead of building from scratch?
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Document:
    title: str
    sections: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def clone(self, **overrides) -> "Document":
        """Deep copy, then apply attribute overrides"""
        duplicate = copy.deepcopy(self)
        for name, value in overrides.items():
            setattr(duplicate, name, value)
        return duplicate


class PrototypeRegistry:
    def __init__(self):
        self._prototypes: Dict[str, Document] = {}

    def register(self, name: str, prototype: Document) -> None:
        self._prototypes[name] = prototype

    def unregister(self, name: str) -> None:
        del self._prototypes[name]

    def clone(self, name: str, **overrides) -> Document:
        if name not in self._prototypes:
            raise KeyError(f"No prototype registered as '{name}'")
        return self._prototypes[name].clone(**overrides)

    def names(self) -> List[str]:
        return list(self._prototypes)


def demo() -> dict:
    registry = PrototypeRegistry()
    registry.register(
        "quarterly_report",
        Document(
            title="Quarterly Report",
            sections=["Summary", "Revenue", "Outlook"],
            metadata={"confidential": True, "reviewers": ["finance"]},
        ),
    )

    q1 = registry.clone("quarterly_report", title="Q1 Report")
    q2 = registry.clone("quarterly_report", title="Q2 Report")
    q2.sections.append("Hiring")
    q2.metadata["reviewers"].append("hr")

    print(f"Cloned '{q1.title}' with sections {q1.sections}")
    print(f"Cloned '{q2.title}' with sections {q2.sections}")

    original = registry.clone("quarterly_report")
    print(f"Prototype still has sections {original.sections}")
    return {
        "q1": q1.title,
        "q2_sections": q2.sections,
        "prototype_sections": original.sections,
    }
