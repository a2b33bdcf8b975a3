"""
utils.py - shared, low-level helpers for the jsonshape package.

This module consolidates the small predicates the engine and the schema
parser both need:
- Kind resolution (Python value -> JSON kind name)
- Strict, non-coercing equality for ``const`` / ``enum``
- Literal rendering for error messages
- Own-key access for mappings that model inheritance
"""

from __future__ import annotations

import math
import numbers
from collections import ChainMap
from collections.abc import Mapping
from typing import Any

# --------------------------------------------------------------------------- #
# Kind resolution                                                             #
# --------------------------------------------------------------------------- #

PRIMITIVE_KINDS = frozenset({"string", "number", "boolean"})


def _kind_of(value: Any) -> str:
    """Classify *value* into its JSON kind.

    ``bool`` is tested before numbers since it subclasses ``int``.  Values
    outside the JSON data model resolve to their class name so that they
    never satisfy a permitted kind.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _is_finite_number(value: Any) -> bool:
    """True for numbers other than ``NaN``/``inf``.

    Integers are always finite, even past float range; other reals only go
    through :func:`math.isfinite`.
    """
    if _kind_of(value) != "number":
        return False
    if isinstance(value, numbers.Integral):
        return True
    try:
        return math.isfinite(value)
    except OverflowError:
        # an exact rational (e.g. Fraction) beyond float range is still finite
        return True


def _is_integral(value: Any) -> bool:
    """True for finite numbers with no fractional part (``3`` and ``3.0``)."""
    if not _is_finite_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return value % 1 == 0


# --------------------------------------------------------------------------- #
# Equality & literals                                                         #
# --------------------------------------------------------------------------- #

def _strict_equal(a: Any, b: Any) -> bool:
    """Equality without coercion: both sides must resolve to the same kind.

    ``1 == 1.0`` holds (both are numbers) but ``True`` never equals ``1``
    and ``"1"`` never equals ``1``.
    """
    return _kind_of(a) == _kind_of(b) and a == b


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_literal(value: Any) -> str:
    """Render a primitive the way error messages quote it."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, str):
        return f"'{value}'"
    if isinstance(value, numbers.Real):
        return _format_number(value)
    return str(value)


# --------------------------------------------------------------------------- #
# Own keys                                                                    #
# --------------------------------------------------------------------------- #

def _own_keys(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the mapping holding *value*'s own (non-inherited) keys.

    A :class:`collections.ChainMap` models an inheritance chain: only its
    first map is "own", the parents are inherited.
    """
    if isinstance(value, ChainMap):
        return value.maps[0]
    return value
