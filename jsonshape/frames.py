"""
frames.py - validate the rows of a pandas DataFrame against a row schema.

Each row is turned into a plain record (``orient="records"``) and handed to
the validator; the first failing row wins and its positional index is
prepended to the error path.  Missing cells (``NaN``, ``NaT``, ``None``)
become JSON ``null``, everything else is passed through untouched.
"""

from __future__ import annotations

from typing import Any, Mapping

import pandas as pd

from . import validator as _engine
from .model import SchemaNode, ValidationResult

__all__ = ["frame_records", "validate_frame"]


def frame_records(frame: pd.DataFrame) -> list[dict[Any, Any]]:
    """Return *frame* as a list of row dicts holding Python scalars."""
    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"Expected a pandas DataFrame, got {type(frame).__name__}")
    cleaned = frame.astype(object).where(frame.notna(), None)
    return cleaned.to_dict(orient="records")


def validate_frame(
    schema: _engine.Validator | Mapping[str, Any] | SchemaNode,
    frame: pd.DataFrame,
) -> ValidationResult:
    """Validate every row of *frame*, returning the first failure.

    *schema* may be a compiled validator or anything :func:`compile` accepts.
    """
    check = schema if callable(schema) else _engine.compile(schema)
    for idx, record in enumerate(frame_records(frame)):
        result = check(record)
        if not result.ok:
            return ValidationResult.failure(result.message, (idx,) + result.path, result.received)
    return ValidationResult.success()
