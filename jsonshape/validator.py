"""
validator.py - the recursive, first-error-wins validation engine
===============================================================

A schema is compiled once into a validator callable; every call walks the
schema tree and the data in lockstep and returns a single
:class:`~jsonshape.model.ValidationResult`.  Nothing is raised for data
violations, the first failing check is the answer.

Public API
----------
compile(schema) -> Callable[[Any], ValidationResult]
    Parse *schema* (mapping or :class:`SchemaNode`) and return a pure,
    thread-safe validator.

validate(value, *, schema) -> None
    One-shot helper that raises :class:`ValidationError` on failure.

Check order per node
--------------------
1. kind membership (``integer`` accepts integral numbers)
2. ``const`` then ``enum``
3. facets of the resolved kind only; facets of other kinds are ignored
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from . import formats, utils
from .model import ErrorPath, SchemaNode, ValidationResult
from .schema import parse_schema

__all__ = [
    "Validator",
    "compile",
    "validate",
]

log = logging.getLogger(__name__)

Validator = Callable[[Any], ValidationResult]

_OK = ValidationResult.success()
_fail = ValidationResult.failure

# --------------------------------------------------------------------------- #
# Node dispatch                                                               #
# --------------------------------------------------------------------------- #

def _expected(node: SchemaNode) -> str:
    return " or ".join(node.types)


def _kind_permitted(node: SchemaNode, kind: str, data: Any) -> bool:
    if kind in node.types:
        return True
    return kind == "number" and "integer" in node.types and utils._is_integral(data)


def _enum_mismatch(node: SchemaNode, data: Any, kind: str) -> bool:
    if data is not None and kind not in utils.PRIMITIVE_KINDS:
        return True
    return not any(utils._strict_equal(data, option) for option in node.enum)


def _validate_node(node: SchemaNode, path: ErrorPath, data: Any) -> ValidationResult:
    kind = utils._kind_of(data)

    if not _kind_permitted(node, kind, data):
        return _fail(f"Expected {_expected(node)} but got {kind}", path, data)

    if node.has_const and not utils._strict_equal(data, node.const):
        return _fail(f"Value must equal {utils._format_literal(node.const)}", path, data)

    if node.enum is not None and _enum_mismatch(node, data, kind):
        return _fail("Value not in enum", path, data)

    check = _KIND_CHECKS.get(kind)
    if check is None:
        return _OK
    return check(node, path, data)


# --------------------------------------------------------------------------- #
# Per-kind facet checks                                                       #
# --------------------------------------------------------------------------- #

def _validate_object(node: SchemaNode, path: ErrorPath, data: Any) -> ValidationResult:
    if not isinstance(data, Mapping):
        return _fail("Expected object", path, data)

    own = utils._own_keys(data)
    properties = node.properties or {}

    # 1) required, in declared order ----------------------------------------
    for key in node.required:
        if key not in own:
            return _fail(f"Missing required property '{key}'", path)

    # 2) declared properties, in declared order -----------------------------
    for key, sub in properties.items():
        if key in own:
            result = _validate_node(sub, path + (key,), own[key])
            if not result.ok:
                return result

    # 3) extras, in data order ----------------------------------------------
    extras = node.additional_properties
    if isinstance(extras, SchemaNode):
        for key, value in own.items():
            if key not in properties:
                result = _validate_node(extras, path + (key,), value)
                if not result.ok:
                    return result
    elif extras is False:
        for key in own:
            if key not in properties:
                return _fail(f"Unexpected property '{key}'", path)

    return _OK


def _validate_array(node: SchemaNode, path: ErrorPath, data: Any) -> ValidationResult:
    if not isinstance(data, (list, tuple)):
        return _fail("Expected array", path, data)

    size = len(data)
    if node.min_items is not None and size < node.min_items:
        return _fail(f"Expected at least {node.min_items} items, got {size}", path, size)
    if node.max_items is not None and size > node.max_items:
        return _fail(f"Expected at most {node.max_items} items, got {size}", path, size)

    if node.items is not None:
        for idx, item in enumerate(data):
            result = _validate_node(node.items, path + (idx,), item)
            if not result.ok:
                return result

    return _OK


def _validate_string(node: SchemaNode, path: ErrorPath, data: Any) -> ValidationResult:
    if not isinstance(data, str):
        return _fail("Expected string", path, data)

    size = len(data)
    if node.min_length is not None and size < node.min_length:
        return _fail(f"String length < {node.min_length}", path, size)
    if node.max_length is not None and size > node.max_length:
        return _fail(f"String length > {node.max_length}", path, size)

    # author anchors are redundant: the whole string must match
    if node.regex is not None and node.regex.fullmatch(data) is None:
        return _fail(f"String does not match pattern /{node.pattern}/", path, data)

    if node.format and not formats.is_format_valid(node.format, data):
        return _fail(f"Invalid {node.format} format", path, data)
    if node.not_format and not formats.is_format_valid(node.not_format, data, False):
        return _fail(f"Must not be {node.not_format} format", path, data)

    return _OK


def _validate_number(node: SchemaNode, path: ErrorPath, data: Any) -> ValidationResult:
    # integer-only nodes already rejected fractions during kind resolution
    if not utils._is_finite_number(data):
        return _fail(f"Expected {_expected(node)}", path, data)

    fmt = utils._format_number
    if node.minimum is not None and data < node.minimum:
        return _fail(f"Must be >= {fmt(node.minimum)}", path, data)
    if node.maximum is not None and data > node.maximum:
        return _fail(f"Must be <= {fmt(node.maximum)}", path, data)
    if node.exclusive_minimum is not None and not data > node.exclusive_minimum:
        return _fail(f"Must be > {fmt(node.exclusive_minimum)}", path, data)
    if node.exclusive_maximum is not None and not data < node.exclusive_maximum:
        return _fail(f"Must be < {fmt(node.exclusive_maximum)}", path, data)

    return _OK


def _validate_boolean(node: SchemaNode, path: ErrorPath, data: Any) -> ValidationResult:
    if not isinstance(data, bool):
        return _fail("Expected boolean", path, data)
    return _OK


_KIND_CHECKS: dict[str, Callable[[SchemaNode, ErrorPath, Any], ValidationResult]] = {
    "object":  _validate_object,
    "array":   _validate_array,
    "string":  _validate_string,
    "number":  _validate_number,
    "boolean": _validate_boolean,
}

# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #

def _count_nodes(node: SchemaNode) -> int:
    return 1 + sum(_count_nodes(child) for child in node.children())


def compile(schema: Mapping[str, Any] | SchemaNode) -> Validator:
    """Compile *schema* into a reusable validator.

    The schema is parsed (and its patterns compiled) once, here; a malformed
    schema raises :class:`~jsonshape.model.SchemaError` immediately.  The
    returned callable holds no mutable state and can be shared freely.
    """
    root = parse_schema(schema)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("compiled schema: %d node(s), root type %s", _count_nodes(root), list(root.types))

    def _validator(data: Any) -> ValidationResult:
        return _validate_node(root, (), data)

    _validator.schema = root  # type: ignore[attr-defined]
    return _validator


def validate(value: Any, *, schema: Mapping[str, Any] | SchemaNode) -> None:
    """Assert that *value* satisfies *schema*.

    Raises
    ------
    ValidationError
        Carrying the first failing :class:`ValidationResult`.
    """
    compile(schema)(value).raise_for_error()
