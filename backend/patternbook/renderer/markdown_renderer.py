"""
Markdown renderer - regenerates the catalog document.

For every pattern: heading, question prompt, example source in a fenced
python block, then the rationale bullets.
"""

import importlib
import inspect
import sys
from typing import List, Optional, Sequence

from patternbook.patterns.registry import Pattern, PatternCategory
from patternbook.renderer.mermaid_renderer import render_related_mermaid


def get_example_source(pattern: Pattern) -> Optional[str]:
    """Source of the pattern's example module, or None when there is none"""
    if not pattern.module:
        return None
    try:
        module = importlib.import_module(pattern.module)
        return inspect.getsource(module)
    except (ImportError, OSError, TypeError) as e:
        print(f"[RENDERER] No source for '{pattern.id}': {e}", file=sys.stderr)
        return None


def _anchor(pattern: Pattern) -> str:
    return pattern.name.lower().replace(" ", "-")


def render_pattern_markdown(pattern: Pattern, heading_level: int = 3) -> str:
    lines = [f"{'#' * heading_level} {pattern.name}", ""]

    if pattern.question:
        lines.extend([f"**Q:** {pattern.question}", ""])

    if pattern.description:
        lines.extend([f"_{pattern.description}_", ""])

    source = get_example_source(pattern)
    if source:
        lines.extend(["```python", source.rstrip(), "```", ""])

    if pattern.rationale:
        lines.append("**Why this works:**")
        lines.append("")
        lines.extend(f"- {bullet}" for bullet in pattern.rationale)
        lines.append("")

    if pattern.trade_offs:
        for key in ("pros", "cons"):
            if key in pattern.trade_offs:
                lines.append(f"- **{key.capitalize()}:** {pattern.trade_offs[key]}")
        lines.append("")

    if pattern.related:
        lines.extend([f"Related: {', '.join(pattern.related)}", ""])

    return "\n".join(lines)


def render_catalog_markdown(
    patterns: Sequence[Pattern],
    title: str = "Design Patterns Catalog",
    include_diagram: bool = True,
) -> str:
    lines: List[str] = [f"# {title}", ""]

    grouped = {
        category: [p for p in patterns if p.category == category]
        for category in PatternCategory
    }

    # -------------------------
    # Table of contents
    # -------------------------
    lines.extend(["## Contents", ""])
    for category, members in grouped.items():
        if not members:
            continue
        lines.append(f"- {category.value.capitalize()}")
        for pattern in members:
            lines.append(f"  - [{pattern.name}](#{_anchor(pattern)})")
    lines.append("")

    if include_diagram and patterns:
        lines.extend(["## Related patterns", "", "```mermaid", render_related_mermaid(patterns), "```", ""])

    # -------------------------
    # Sections per category
    # -------------------------
    for category, members in grouped.items():
        if not members:
            continue
        lines.extend([f"## {category.value.capitalize()} patterns", ""])
        for pattern in members:
            lines.append(render_pattern_markdown(pattern))

    return "\n".join(lines).rstrip() + "\n"
