from patternbook.patterns import PATTERN_CATALOG, Pattern, PatternCategory
from patternbook.renderer import render_catalog_markdown, render_pattern_markdown, render_related_mermaid
from patternbook.renderer.markdown_renderer import get_example_source


def _bare(pattern_id, category, related=None, name=None):
    return Pattern(
        id=pattern_id,
        name=name or pattern_id.title(),
        question="",
        description="",
        category=category,
        related=related or [],
    )


def test_pattern_section(registry):
    text = render_pattern_markdown(registry.get("composite"))

    assert text.startswith("### Composite\n")
    assert "**Q:** Files and folders" in text
    assert "```python\n" in text
    assert "class Folder(FileSystemComponent):" in text
    assert "**Why this works:**" in text
    assert "- Folder.size() recursively sums its children; an empty folder is 0" in text
    assert "- **Pros:**" in text
    assert "Related: decorator, iterator, visitor" in text


def test_pattern_without_module_has_no_code_block():
    text = render_pattern_markdown(_bare("loose", PatternCategory.BEHAVIORAL))
    assert "```" not in text
    assert get_example_source(_bare("loose", PatternCategory.BEHAVIORAL)) is None


def test_unimportable_module_has_no_source():
    pattern = _bare("ghost", PatternCategory.BEHAVIORAL)
    pattern.module = "patternbook.examples.no_such_module"
    assert get_example_source(pattern) is None


def test_catalog_document_layout():
    text = render_catalog_markdown(PATTERN_CATALOG)

    assert text.startswith("# Design Patterns Catalog\n")
    assert "## Contents" in text
    assert "  - [Chain of Responsibility](#chain-of-responsibility)" in text
    assert "```mermaid\nflowchart LR" in text

    creational = text.index("## Creational patterns")
    structural = text.index("## Structural patterns")
    behavioral = text.index("## Behavioral patterns")
    assert creational < structural < behavioral
    assert text.count("**Q:**") == 22
    assert text.endswith("\n")


def test_catalog_document_skips_empty_categories():
    text = render_catalog_markdown(
        [_bare("solo", PatternCategory.STRUCTURAL)], title="Mini", include_diagram=False
    )
    assert text.startswith("# Mini\n")
    assert "## Structural patterns" in text
    assert "Creational" not in text
    assert "mermaid" not in text


def test_mermaid_groups_by_category_and_dedupes_edges():
    patterns = [
        _bare("adapter", PatternCategory.STRUCTURAL, related=["decorator", "missing"]),
        _bare("decorator", PatternCategory.STRUCTURAL, related=["adapter"]),
        _bare("command", PatternCategory.BEHAVIORAL, related=["command"], name='Say "hi"'),
    ]
    diagram = render_related_mermaid(patterns)
    lines = diagram.splitlines()

    assert lines[0] == "flowchart LR"
    assert '  subgraph structural["Structural"]' in lines
    assert "creational" not in diagram
    assert """    command["Say 'hi'"]""" in lines
    assert "  adapter --- decorator" in lines
    assert "decorator --- adapter" not in diagram
    assert "missing" not in diagram
    assert "command --- command" not in diagram
