# backend/patternbook/renderer/mermaid_renderer.py

from typing import List, Sequence

from patternbook.patterns.registry import Pattern, PatternCategory


def render_related_mermaid(patterns: Sequence[Pattern]) -> str:
    """
    Render the "related patterns" links as a Mermaid flowchart,
    one subgraph per category. Links to unknown ids are dropped.
    """
    lines = ["flowchart LR"]
    known_ids = {p.id for p in patterns}

    # -------------------------
    # Subgraphs by category
    # -------------------------
    for category in PatternCategory:
        members = [p for p in patterns if p.category == category]
        if not members:
            continue
        lines.append(f'  subgraph {category.value}["{category.value.capitalize()}"]')
        for pattern in members:
            label = pattern.name.replace('"', "'")
            lines.append(f'    {pattern.id}["{label}"]')
        lines.append("  end")

    # -------------------------
    # Edges, each pair once
    # -------------------------
    seen = set()
    edges: List[str] = []
    for pattern in patterns:
        for related_id in pattern.related:
            if related_id not in known_ids or related_id == pattern.id:
                continue
            key = tuple(sorted((pattern.id, related_id)))
            if key in seen:
                continue
            seen.add(key)
            edges.append(f"  {pattern.id} --- {related_id}")

    lines.extend(edges)
    return "\n".join(lines)
