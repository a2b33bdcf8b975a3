"""Shared helpers for the jsonshape test-suite."""
from __future__ import annotations

import contextlib
import json
import tempfile
from pathlib import Path
from typing import Any, Sequence

from jsonshape import ValidationResult

# ------------------------------------------------------------------ #
# Temp files                                                         #
# ------------------------------------------------------------------ #
def tmp_json(obj: Any) -> Path:
    """Write *obj* to a temp file and return its Path (caller must unlink)."""
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    fh.close()
    Path(fh.name).write_text(json.dumps(obj), encoding="utf-8")
    return Path(fh.name)


def tmp_text(text: str, suffix: str = ".json") -> Path:
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
    fh.close()
    Path(fh.name).write_text(text, encoding="utf-8")
    return Path(fh.name)


@contextlib.contextmanager
def tmp_dir():
    """Yield a temporary directory Path that auto-cleans on exit."""
    td = tempfile.TemporaryDirectory()
    try:
        yield Path(td.name)
    finally:
        td.cleanup()


# ------------------------------------------------------------------ #
# Result assertions                                                  #
# ------------------------------------------------------------------ #
class ResultAssertions:
    """Mixin for unittest.TestCase with pass/fail helpers."""

    def assertPasses(self, result: ValidationResult) -> None:
        self.assertTrue(result.ok, f"expected validation to pass, got {result}")

    def assertFails(
        self,
        result: ValidationResult,
        message: str,
        path: Sequence[Any] = (),
    ) -> None:
        """*message* is a regex searched in the failure message."""
        self.assertFalse(result.ok, "expected validation to fail")
        self.assertRegex(result.message, message)
        self.assertEqual(result.path, tuple(path))
