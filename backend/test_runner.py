import sys
import threading
import time

from patternbook.patterns import Pattern, PatternCategory, run_demo


def _pattern_with(demo):
    return Pattern(
        id="sample",
        name="Sample",
        question="",
        description="",
        category=PatternCategory.BEHAVIORAL,
        demo=demo,
    )


def test_runs_catalog_demo(registry, capsys):
    run = run_demo(registry.get("strategy"))

    assert run.succeeded is True
    assert run.error is None
    assert run.result == {"standard": 9.8, "express": 20.0, "free": 0.0}
    assert "express shipping for 4.0kg: $20.00" in run.output
    assert run.duration_ms >= 0
    # demo output is captured, not printed
    assert capsys.readouterr().out == ""


def test_every_catalog_demo_succeeds(registry):
    for pattern in registry.list_all():
        run = run_demo(pattern)
        assert run.succeeded, f"{pattern.id}: {run.error}"
        assert run.output, pattern.id


def test_failure_keeps_partial_output():
    def demo():
        print("before failure")
        raise ValueError("bad input")

    run = run_demo(_pattern_with(demo))
    assert run.succeeded is False
    assert run.error == "ValueError: bad input"
    assert run.output == "before failure\n"
    assert run.result is None


def test_pattern_without_demo():
    run = run_demo(_pattern_with(None))
    assert run.succeeded is False
    assert run.error == "Pattern 'sample' has no demo"
    assert run.output == ""


def test_result_objects_are_serialized():
    class Point:
        def __init__(self):
            self.x = 1
            self._hidden = 2

    run = run_demo(_pattern_with(lambda: {"points": (Point(),), "tags": {"b", "a"}}))
    assert run.result == {"points": [{"x": 1}], "tags": ["a", "b"]}


def test_long_output_is_truncated(monkeypatch):
    monkeypatch.setattr("patternbook.config.DEMO_OUTPUT_LIMIT", 10)
    run = run_demo(_pattern_with(lambda: print("x" * 50)))
    assert run.output == "x" * 10 + "\n... (output truncated)"


def test_to_dict():
    data = run_demo(_pattern_with(lambda: 42)).to_dict()
    assert data["pattern_id"] == "sample"
    assert data["result"] == 42
    assert data["succeeded"] is True


def test_overlapping_runs_capture_only_their_own_output():
    def slow_demo(label):
        def demo():
            for i in range(3):
                print(f"{label}-{i}")
                time.sleep(0.01)
            return label
        return demo

    stdout_before = sys.stdout
    runs = {}

    def worker(label):
        pattern = _pattern_with(slow_demo(label))
        runs[label] = run_demo(pattern)

    threads = [threading.Thread(target=worker, args=(label,)) for label in ("A", "B")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert runs["A"].output == "A-0\nA-1\nA-2\n"
    assert runs["B"].output == "B-0\nB-1\nB-2\n"
    assert runs["A"].result == "A"
    assert sys.stdout is stdout_before
