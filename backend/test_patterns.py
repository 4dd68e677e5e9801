"""
Pattern catalog and registry tests
Run with: pytest test_patterns.py
"""

import pytest

from patternbook.patterns import (
    PATTERN_CATALOG,
    Pattern,
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
    get_registry,
)


def _pattern(pattern_id, category=PatternCategory.BEHAVIORAL, **kwargs):
    defaults = dict(
        name=pattern_id.title(),
        question="",
        description="",
        category=category,
    )
    defaults.update(kwargs)
    return Pattern(id=pattern_id, **defaults)


def test_catalog_has_22_patterns_across_three_categories():
    assert len(PATTERN_CATALOG) == 22
    counts = {}
    for p in PATTERN_CATALOG:
        counts[p.category] = counts.get(p.category, 0) + 1
    assert counts == {
        PatternCategory.CREATIONAL: 5,
        PatternCategory.STRUCTURAL: 7,
        PatternCategory.BEHAVIORAL: 10,
    }


def test_catalog_ids_are_unique():
    ids = [p.id for p in PATTERN_CATALOG]
    assert len(ids) == len(set(ids))


def test_every_entry_has_question_rationale_and_demo():
    for p in PATTERN_CATALOG:
        assert p.question.strip(), p.id
        assert p.rationale, p.id
        assert callable(p.demo), p.id
        assert p.module and p.module.startswith("patternbook.examples."), p.id


def test_related_ids_point_into_catalog():
    ids = {p.id for p in PATTERN_CATALOG}
    for p in PATTERN_CATALOG:
        assert set(p.related) <= ids, p.id


def test_lookup(registry):
    assert registry.get("composite").name == "Composite"
    assert registry.get("nonexistent") is None


def test_get_by_category_keeps_registration_order(registry):
    creational = [p.id for p in registry.get_by_category(PatternCategory.CREATIONAL)]
    assert creational == ["singleton", "factory_method", "abstract_factory", "builder", "prototype"]


def test_get_by_tag(registry):
    ids = [p.id for p in registry.get_by_tag("undo")]
    assert ids == ["command", "memento"]
    assert registry.get_by_tag("no-such-tag") == []


def test_reregistering_replaces_without_duplicate_index_entries():
    reg = PatternRegistry()
    reg.register(_pattern("observer", tags=["events"]))
    reg.register(_pattern("observer", name="Observer v2", tags=["events", "pubsub"]))

    assert reg.get("observer").name == "Observer v2"
    assert [p.id for p in reg.get_by_category(PatternCategory.BEHAVIORAL)] == ["observer"]
    assert [p.id for p in reg.get_by_tag("events")] == ["observer"]
    assert len(reg.list_all()) == 1


def test_replacing_with_new_category_moves_index_entry():
    reg = PatternRegistry()
    reg.register(_pattern("thing", category=PatternCategory.BEHAVIORAL, tags=["old"]))
    reg.register(_pattern("thing", category=PatternCategory.STRUCTURAL))

    assert reg.get_by_category(PatternCategory.BEHAVIORAL) == []
    assert [p.id for p in reg.get_by_category(PatternCategory.STRUCTURAL)] == ["thing"]
    assert reg.get_by_tag("old") == []


@pytest.mark.parametrize(
    "context, expected",
    [
        ("I need undo and a history of user actions", "command"),
        ("Wrap a legacy payment gateway with an incompatible interface", "adapter"),
        ("Render a tree of nested folder objects recursively", "composite"),
        ("Only one instance of the connection pool may exist", "singleton"),
        ("Swap the pricing algorithm at runtime", "strategy"),
    ],
)
def test_find_applicable(registry, context, expected):
    matches = registry.find_applicable(context, max_results=3)
    assert expected in [m.id for m in matches]


def test_find_applicable_scores_descending():
    reg = PatternRegistry()
    reg.register(_pattern("weak", tags=["cache"]))
    reg.register(_pattern("strong", applicable_when=["cache"], tags=["cache"]))

    matches = reg.find_applicable("add a cache")
    assert [m.id for m in matches] == ["strong", "weak"]


def test_find_applicable_excludes_zero_scores(registry):
    assert registry.find_applicable("zzz") == []


@pytest.mark.parametrize("context", ["xylophone", "banana"])
def test_unrelated_words_match_nothing(registry, context):
    assert registry.find_applicable(context, max_results=22) == []


def test_description_overlap_needs_whole_words():
    reg = PatternRegistry()
    reg.register(_pattern("queue", description="Encapsulate a request as an object."))

    assert reg.find_applicable("bananas") == []
    assert reg.find_applicable("requests piling up") == []
    assert [m.id for m in reg.find_applicable("one request, please")] == ["queue"]
    assert [m.id for m in reg.find_applicable("an OBJECT")] == ["queue"]


@pytest.mark.parametrize("max_results", [0, -1])
def test_find_applicable_rejects_non_positive_max_results(registry, max_results):
    with pytest.raises(ValueError):
        registry.find_applicable("undo", max_results=max_results)


def test_find_applicable_respects_max_results(registry):
    assert len(registry.find_applicable("object", max_results=2)) <= 2


def test_suggest_is_alias(registry):
    context = "undo history"
    assert registry.suggest_patterns(context) == registry.find_applicable(context)


def test_pattern_summary(registry):
    summary = registry.get_pattern_summary()
    assert summary["total"] == 22
    assert set(summary["categories"]) == {"creational", "structural", "behavioral"}
    assert {"id": "facade", "name": "Facade"} in summary["categories"]["structural"]


def test_global_registry_is_created_once():
    first = get_pattern_registry()
    assert first is get_pattern_registry()
    assert get_registry() is first
    assert len(first.list_all()) == 22


def test_global_registry_loads_extra_yaml(tmp_path, monkeypatch):
    extra = tmp_path / "extra.yaml"
    extra.write_text(
        "patterns:\n"
        "  - id: repository\n"
        "    name: Repository\n"
        "    category: structural\n"
        "    question: How do you hide persistence details?\n"
    )
    monkeypatch.setattr("patternbook.config.CATALOG_EXTRA_PATH", str(extra))

    registry = get_pattern_registry()
    assert registry.get("repository").category == PatternCategory.STRUCTURAL
    assert len(registry.list_all()) == 23


def test_to_dict_reports_demo_presence():
    data = PATTERN_CATALOG[0].to_dict()
    assert data["id"] == "singleton"
    assert data["category"] == "creational"
    assert data["has_demo"] is True
