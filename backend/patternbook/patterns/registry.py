# backend/patternbook/patterns/registry.py
"""
Pattern Registry - Central store for design pattern entries
"""

import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import yaml


class PatternCategory(Enum):
    """The three classic GoF categories"""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


@dataclass
class Pattern:
    """
    A catalog entry: the question prompt, the illustrative example module
    and the rationale explaining why the pattern fits.
    """
    id: str
    name: str
    question: str
    description: str
    category: PatternCategory

    # Teaching content
    rationale: List[str] = field(default_factory=list)
    participants: List[str] = field(default_factory=list)

    # Matching metadata
    tags: List[str] = field(default_factory=list)
    applicable_when: List[str] = field(default_factory=list)  # Trigger keywords
    trade_offs: Dict[str, str] = field(default_factory=dict)  # pros/cons
    related: List[str] = field(default_factory=list)  # ids of related patterns

    # Example code
    module: Optional[str] = None  # dotted path of the example module
    demo: Optional[Callable[[], Any]] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict:
        """Plain representation, same shape the YAML loader reads"""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "question": self.question,
            "description": self.description,
            "rationale": list(self.rationale),
            "participants": list(self.participants),
            "tags": list(self.tags),
            "applicable_when": list(self.applicable_when),
            "trade_offs": dict(self.trade_offs),
            "related": list(self.related),
            "module": self.module,
            "has_demo": self.demo is not None,
        }

    def to_yaml_str(self) -> str:
        data = self.to_dict()
        data.pop("has_demo")
        return yaml.safe_dump({"patterns": [data]}, default_flow_style=False, sort_keys=False)


class PatternRegistry:
    """
    Central registry for design patterns

    Provides pattern lookup, filtering, and matching capabilities.
    """

    def __init__(self):
        self.patterns: Dict[str, Pattern] = {}
        self._category_index: Dict[PatternCategory, List[str]] = {cat: [] for cat in PatternCategory}
        self._tag_index: Dict[str, List[str]] = {}

    def register(self, pattern: Pattern) -> None:
        """Register a pattern; an existing entry with the same id is replaced"""
        if pattern.id in self.patterns:
            print(f"[REGISTRY] Replacing pattern '{pattern.id}'", file=sys.stderr)
            self._unindex(self.patterns[pattern.id])

        self.patterns[pattern.id] = pattern

        # Update category index
        self._category_index[pattern.category].append(pattern.id)

        # Update tag index
        for tag in pattern.tags:
            ids = self._tag_index.setdefault(tag, [])
            if pattern.id not in ids:
                ids.append(pattern.id)

    def _unindex(self, pattern: Pattern) -> None:
        category_ids = self._category_index[pattern.category]
        if pattern.id in category_ids:
            category_ids.remove(pattern.id)
        for tag in pattern.tags:
            ids = self._tag_index.get(tag, [])
            if pattern.id in ids:
                ids.remove(pattern.id)
            if not ids:
                self._tag_index.pop(tag, None)

    def get(self, pattern_id: str) -> Optional[Pattern]:
        """Get a pattern by ID"""
        return self.patterns.get(pattern_id)

    def find_applicable(self, context: str, max_results: int = 5) -> List[Pattern]:
        """Find patterns applicable to a described design problem"""
        if max_results < 1:
            raise ValueError(f"max_results must be at least 1, got {max_results}")

        context_lower = context.lower()
        context_words = set(re.findall(r"[a-z]+", context_lower))
        scored_patterns = []

        for pattern in self.patterns.values():
            score = 0

            # Check applicable_when keywords
            for keyword in pattern.applicable_when:
                if keyword.lower() in context_lower:
                    score += 2

            # Check tags
            for tag in pattern.tags:
                if tag.lower() in context_lower:
                    score += 1

            # Check name and description
            if pattern.name.lower() in context_lower:
                score += 3
            description_words = re.findall(r"[a-z]+", pattern.description.lower())[:10]
            if any(word in context_words for word in description_words):
                score += 1

            if score > 0:
                scored_patterns.append((score, pattern))

        # Stable sort keeps registration order among equal scores
        scored_patterns.sort(key=lambda x: x[0], reverse=True)
        results = [p for _, p in scored_patterns[:max_results]]

        print(f"[REGISTRY] find_applicable('{context[:40]}') -> {[p.id for p in results]}", file=sys.stderr)
        return results

    def suggest_patterns(self, context: str, max_results: int = 5) -> List[Pattern]:
        """Suggest patterns based on context - alias for find_applicable"""
        return self.find_applicable(context, max_results)

    def get_by_category(self, category: PatternCategory) -> List[Pattern]:
        """Get all patterns in a category"""
        pattern_ids = self._category_index.get(category, [])
        return [self.patterns[pid] for pid in pattern_ids if pid in self.patterns]

    def get_by_tag(self, tag: str) -> List[Pattern]:
        """Get all patterns with a specific tag"""
        pattern_ids = self._tag_index.get(tag, [])
        return [self.patterns[pid] for pid in pattern_ids if pid in self.patterns]

    def list_all(self) -> List[Pattern]:
        """List all registered patterns"""
        return list(self.patterns.values())

    def get_pattern_summary(self) -> dict:
        return {
            "total": len(self.patterns),
            "categories": {
                category.value: [
                    {"id": p.id, "name": p.name}
                    for p in self.get_by_category(category)
                ]
                for category in PatternCategory
            },
        }


# Global registry instance
_global_registry: Optional[PatternRegistry] = None


def get_pattern_registry() -> PatternRegistry:
    """Get or create the global pattern registry"""
    global _global_registry
    if _global_registry is None:
        print("[REGISTRY] Creating global PatternRegistry", file=sys.stderr)
        registry = PatternRegistry()

        from patternbook.config import CATALOG_EXTRA_PATH
        from patternbook.patterns.catalog import register_all_patterns
        from patternbook.patterns.loader import CatalogLoader

        register_all_patterns(registry)
        if CATALOG_EXTRA_PATH:
            for pattern in CatalogLoader(CATALOG_EXTRA_PATH).load_patterns():
                registry.register(pattern)
        _global_registry = registry
    return _global_registry


def reset_pattern_registry() -> None:
    """Drop the global registry; the next lookup rebuilds it"""
    global _global_registry
    _global_registry = None


# Alias for backwards compatibility
get_registry = get_pattern_registry
