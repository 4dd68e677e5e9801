import json

import pytest
import yaml

from patternbook import __version__
from patternbook.cli import main, parse_args


def test_list_all(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Creational:"
    assert "Behavioral:" in out
    assert "chain_of_responsibility" in out


def test_list_one_category(capsys):
    assert main(["list", "--category", "structural"]) == 0
    out = capsys.readouterr().out
    assert "Creational:" not in out
    assert "flyweight" in out


def test_list_rejects_unknown_category():
    with pytest.raises(SystemExit):
        parse_args(["list", "--category", "architectural"])


def test_command_is_required():
    with pytest.raises(SystemExit):
        parse_args([])


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_show_json(capsys):
    assert main(["show", "observer"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["id"] == "observer"
    assert data["category"] == "behavioral"


def test_show_yaml(capsys):
    assert main(["show", "bridge", "--format", "yaml"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["name"] == "Bridge"


def test_show_unknown(capsys):
    assert main(["show", "monostate"]) == 1
    assert "Unknown pattern: monostate" in capsys.readouterr().err


def test_run_prints_output_and_result(capsys):
    assert main(["run", "chain_of_responsibility"]) == 0
    out = capsys.readouterr().out
    assert "Front Desk handled ticket T-1" in out
    assert out.rstrip().endswith('-> ["Front Desk", "Tech Support", "Engineering", null]')


def test_run_unknown(capsys):
    assert main(["run", "monostate"]) == 1


def test_suggest(capsys):
    assert main(["suggest", "undo history", "--max-results", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("command")
    assert len(out.splitlines()) == 1


def test_suggest_nothing(capsys):
    assert main(["suggest", "zzz"]) == 0
    assert capsys.readouterr().out == "No matching patterns\n"


def test_render_to_stdout(capsys):
    assert main(["render"]) == 0
    assert capsys.readouterr().out.startswith("# Design Patterns Catalog")


def test_render_to_file(tmp_path, capsys):
    target = tmp_path / "CATALOG.md"
    assert main(["render", "--output", str(target)]) == 0
    assert target.read_text(encoding="utf-8").count("**Why this works:**") == 22
    assert capsys.readouterr().out == f"Wrote {target}\n"


def test_validate(capsys):
    assert main(["validate", "--strict"]) == 0
    assert capsys.readouterr().out.startswith("Valid | 22 patterns")


def test_validate_fails_on_broken_extra_catalog(tmp_path, monkeypatch, capsys):
    extra = tmp_path / "extra.yaml"
    extra.write_text("patterns:\n  - id: singleton\n    name: ''\n    category: creational\n")
    monkeypatch.setattr("patternbook.config.CATALOG_EXTRA_PATH", str(extra))

    assert main(["validate"]) == 1
    assert "EMPTY_NAME" in capsys.readouterr().out


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_suggest_rejects_non_positive_max_results(value):
    with pytest.raises(SystemExit):
        parse_args(["suggest", "undo", "--max-results", value])
