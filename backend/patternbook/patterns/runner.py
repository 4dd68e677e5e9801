# backend/patternbook/patterns/runner.py
"""
Demo Runner - Executes a pattern's illustration and captures its console output
"""

import io
import sys
import threading
import time
from contextlib import redirect_stdout
from dataclasses import dataclass
from typing import Any, Optional

from patternbook import config
from patternbook.patterns.registry import Pattern
from patternbook.utils.serialization import serialize_value

# sys.stdout is process-wide, so only one demo may capture it at a time
_capture_lock = threading.Lock()


@dataclass
class DemoRun:
    pattern_id: str
    output: str
    succeeded: bool
    result: Any = None
    error: Optional[str] = None
    duration_ms: float = 0.0

    def to_dict(self) -> dict:
        return {
            "pattern_id": self.pattern_id,
            "output": self.output,
            "succeeded": self.succeeded,
            "result": self.result,
            "error": self.error,
            "duration_ms": self.duration_ms,
        }


def run_demo(pattern: Pattern) -> DemoRun:
    """
    Run the pattern's demo() with stdout captured.

    Never raises: a failing demo is reported through ``succeeded`` and
    ``error`` and keeps whatever it printed before failing.
    """
    if pattern.demo is None:
        return DemoRun(
            pattern_id=pattern.id,
            output="",
            succeeded=False,
            error=f"Pattern '{pattern.id}' has no demo",
        )

    buffer = io.StringIO()
    result = None
    error = None

    with _capture_lock:
        started = time.perf_counter()
        try:
            with redirect_stdout(buffer):
                result = pattern.demo()
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        duration_ms = round((time.perf_counter() - started) * 1000, 3)

    output = buffer.getvalue()
    if len(output) > config.DEMO_OUTPUT_LIMIT:
        output = output[: config.DEMO_OUTPUT_LIMIT] + "\n... (output truncated)"

    if error:
        print(f"[RUNNER] Demo '{pattern.id}' failed: {error}", file=sys.stderr)

    return DemoRun(
        pattern_id=pattern.id,
        output=output,
        succeeded=error is None,
        result=serialize_value(result) if error is None else None,
        error=error,
        duration_ms=duration_ms,
    )
