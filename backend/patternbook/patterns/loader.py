import importlib
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

import yaml

from patternbook.patterns.registry import Pattern, PatternCategory


class CatalogLoader:
    """
    Loads extra catalog entries from a YAML file.

    File structure:
        patterns:
          - id: repository
            name: Repository
            category: structural
            question: ...
            description: ...
            rationale: [...]
            module: mypackage.examples.repository   # optional, must expose demo()
    """

    # path -> (patterns, skipped)
    _cache: Dict[str, Tuple[List[Pattern], List[str]]] = {}

    LIST_FIELDS = ("rationale", "participants", "tags", "applicable_when", "related")

    def __init__(self, path: str):
        self.path = path
        self.skipped: List[str] = []

    def load_patterns(self) -> List[Pattern]:
        cache_key = os.path.abspath(self.path)
        if cache_key in self._cache:
            patterns, skipped = self._cache[cache_key]
            self.skipped = list(skipped)
            return list(patterns)

        if not os.path.exists(self.path):
            print(f"[LOADER] No catalog file at {self.path}", file=sys.stderr)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            print(f"[LOADER] Error reading {self.path}: {e}", file=sys.stderr)
            return []

        entries = data.get("patterns", []) if isinstance(data, dict) else []
        patterns = []
        for i, entry in enumerate(entries):
            try:
                patterns.append(self._build_pattern(entry))
            except (ValueError, TypeError, ImportError, AttributeError) as e:
                label = entry.get("id", f"#{i}") if isinstance(entry, dict) else f"#{i}"
                self.skipped.append(f"{label}: {e}")
                print(f"[LOADER] Skipping entry {label}: {e}", file=sys.stderr)

        self._cache[cache_key] = (patterns, list(self.skipped))
        print(f"[LOADER] Loaded {len(patterns)} patterns from {self.path}", file=sys.stderr)
        return list(patterns)

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()

    def _build_pattern(self, entry: Any) -> Pattern:
        if not isinstance(entry, dict):
            raise TypeError("entry must be a mapping")
        if not entry.get("id"):
            raise ValueError("entry has no id")

        category = PatternCategory(entry.get("category", ""))

        for name in self.LIST_FIELDS:
            if entry.get(name) is not None and not isinstance(entry[name], list):
                raise ValueError(f"'{name}' must be a list")
        if entry.get("trade_offs") is not None and not isinstance(entry["trade_offs"], dict):
            raise ValueError("'trade_offs' must be a mapping")

        module_path: Optional[str] = entry.get("module")
        demo = None
        if module_path:
            try:
                module = importlib.import_module(module_path)
            except Exception as e:
                raise ImportError(f"could not import {module_path}: {type(e).__name__}: {e}") from e
            demo = getattr(module, "demo")

        return Pattern(
            id=entry["id"],
            name=entry.get("name", entry["id"].replace("_", " ").title()),
            question=entry.get("question", ""),
            description=entry.get("description", ""),
            category=category,
            rationale=list(entry.get("rationale") or []),
            participants=list(entry.get("participants") or []),
            tags=list(entry.get("tags") or []),
            applicable_when=list(entry.get("applicable_when") or []),
            trade_offs=dict(entry.get("trade_offs") or {}),
            related=list(entry.get("related") or []),
            module=module_path,
            demo=demo,
        )
