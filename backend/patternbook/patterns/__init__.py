# backend/patternbook/patterns/__init__.py
"""
Design Pattern Library

Provides the catalog of classic design patterns that can be:
- Browsed by category or tag
- Suggested for a described design problem
- Run as small console illustrations
"""

from patternbook.patterns.registry import (
    Pattern,
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
    get_registry,
    reset_pattern_registry,
)
from patternbook.patterns.catalog import (
    PATTERN_CATALOG,
    register_all_patterns,
)
from patternbook.patterns.loader import CatalogLoader
from patternbook.patterns.runner import DemoRun, run_demo

__all__ = [
    "Pattern",
    "PatternCategory",
    "PatternRegistry",
    "get_pattern_registry",
    "get_registry",
    "reset_pattern_registry",
    "PATTERN_CATALOG",
    "register_all_patterns",
    "CatalogLoader",
    "DemoRun",
    "run_demo",
]
