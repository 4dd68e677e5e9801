from patternbook.renderer.markdown_renderer import render_catalog_markdown, render_pattern_markdown
from patternbook.renderer.mermaid_renderer import render_related_mermaid

__all__ = [
    "render_catalog_markdown",
    "render_pattern_markdown",
    "render_related_mermaid",
]
