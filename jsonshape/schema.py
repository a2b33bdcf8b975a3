"""
schema.py - turn a plain JSON-Schema-lite mapping into a SchemaNode tree.

Public API
----------
parse_schema(schema: Mapping | SchemaNode) -> SchemaNode
    Read every supported keyword into an explicit optional field, compile
    ``pattern`` once, and freeze the result.  Unknown keywords are ignored.

Supported keywords
------------------
* ``type`` (scalar or list) - required on every node
* ``properties`` / ``required`` / ``additionalProperties``
* ``items`` / ``minItems`` / ``maxItems``
* ``minLength`` / ``maxLength`` / ``pattern`` / ``format`` / ``not.format``
* ``minimum`` / ``maximum`` / ``exclusiveMinimum`` / ``exclusiveMaximum``
* ``enum`` / ``const`` (primitive values only)

Only the shape needed to build the tree is checked here; malformed input
raises :class:`~jsonshape.model.SchemaError`.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from . import utils
from .model import KINDS, UNSET, SchemaError, SchemaNode

__all__ = ["parse_schema"]

_PRIMITIVES = frozenset({"string", "number", "boolean", "null"})

# --------------------------------------------------------------------------- #
# Keyword readers                                                             #
# --------------------------------------------------------------------------- #

def _read_types(raw: Any, where: str) -> tuple[str, ...]:
    if raw is None:
        raise SchemaError(f"{where}: missing 'type'")
    names = list(raw) if isinstance(raw, (list, tuple)) else [raw]
    if not names:
        raise SchemaError(f"{where}: 'type' must name at least one kind")
    for name in names:
        if name not in KINDS:
            raise SchemaError(f"{where}: unknown type {name!r}; expected one of {list(KINDS)}")
    # keep declaration order, drop duplicates
    return tuple(dict.fromkeys(names))


def _check_float_range(value: Any, key: str, where: str) -> None:
    """Limits must be representable as a float."""
    try:
        float(value)
    except OverflowError as exc:
        raise SchemaError(f"{where}: '{key}' is out of range, got {value!r}") from exc


def _read_count(schema: Mapping[str, Any], key: str, where: str) -> Optional[int]:
    if key not in schema:
        return None
    value = schema[key]
    if not utils._is_integral(value) or value < 0:
        raise SchemaError(f"{where}: '{key}' must be a non-negative integer, got {value!r}")
    _check_float_range(value, key, where)
    return int(value)


def _read_bound(schema: Mapping[str, Any], key: str, where: str) -> Optional[float]:
    if key not in schema:
        return None
    value = schema[key]
    if not utils._is_finite_number(value):
        raise SchemaError(f"{where}: '{key}' must be a finite number, got {value!r}")
    _check_float_range(value, key, where)
    return value


def _read_primitive(value: Any, where: str, key: str) -> Any:
    if utils._kind_of(value) not in _PRIMITIVES:
        raise SchemaError(f"{where}: '{key}' only supports string/number/boolean/null, got {value!r}")
    return value


def _read_pattern(raw: Any, where: str) -> tuple[Optional[str], Optional["re.Pattern[str]"]]:
    if raw is None:
        return None, None
    if not isinstance(raw, str):
        raise SchemaError(f"{where}: 'pattern' must be a string, got {raw!r}")
    try:
        return raw, re.compile(raw)
    except re.error as exc:
        raise SchemaError(f"{where}: invalid pattern {raw!r}: {exc}") from exc


def _read_format(raw: Any, where: str, key: str) -> Optional[str]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise SchemaError(f"{where}: '{key}' must be a string, got {raw!r}")
    return raw


# --------------------------------------------------------------------------- #
# Node builder                                                                #
# --------------------------------------------------------------------------- #

def _parse(schema: Any, where: str) -> SchemaNode:
    if isinstance(schema, SchemaNode):
        return schema
    if not isinstance(schema, Mapping):
        raise SchemaError(f"{where}: schema node must be a mapping, got {type(schema).__name__}")

    types = _read_types(schema.get("type"), where)

    # object facets ---------------------------------------------------------
    properties = None
    if "properties" in schema:
        raw_props = schema["properties"]
        if not isinstance(raw_props, Mapping):
            raise SchemaError(f"{where}: 'properties' must be a mapping")
        properties = MappingProxyType({
            name: _parse(sub, f"{where}.properties.{name}")
            for name, sub in raw_props.items()
        })

    required = schema.get("required", ())
    if not isinstance(required, (list, tuple)) or not all(isinstance(k, str) for k in required):
        raise SchemaError(f"{where}: 'required' must be a list of property names")

    additional: Any = schema.get("additionalProperties", True)
    if not isinstance(additional, bool):
        additional = _parse(additional, f"{where}.additionalProperties")

    # array facets ----------------------------------------------------------
    items = None
    if schema.get("items") is not None:
        items = _parse(schema["items"], f"{where}.items")

    # string facets ---------------------------------------------------------
    pattern, regex = _read_pattern(schema.get("pattern"), where)
    negated = schema.get("not") or {}
    if not isinstance(negated, Mapping):
        raise SchemaError(f"{where}: 'not' must be a mapping")

    # cross-kind ------------------------------------------------------------
    enum = None
    if "enum" in schema:
        raw_enum = schema["enum"]
        if not isinstance(raw_enum, (list, tuple)):
            raise SchemaError(f"{where}: 'enum' must be a list")
        enum = tuple(_read_primitive(v, where, "enum") for v in raw_enum)

    const = UNSET
    if "const" in schema:
        const = _read_primitive(schema["const"], where, "const")

    return SchemaNode(
        types=types,
        description=schema.get("description"),
        properties=properties,
        required=tuple(required),
        additional_properties=additional,
        items=items,
        min_items=_read_count(schema, "minItems", where),
        max_items=_read_count(schema, "maxItems", where),
        min_length=_read_count(schema, "minLength", where),
        max_length=_read_count(schema, "maxLength", where),
        pattern=pattern,
        regex=regex,
        format=_read_format(schema.get("format"), where, "format"),
        not_format=_read_format(negated.get("format"), where, "not.format"),
        minimum=_read_bound(schema, "minimum", where),
        maximum=_read_bound(schema, "maximum", where),
        exclusive_minimum=_read_bound(schema, "exclusiveMinimum", where),
        exclusive_maximum=_read_bound(schema, "exclusiveMaximum", where),
        enum=enum,
        const=const,
    )


def parse_schema(schema: Mapping[str, Any] | SchemaNode) -> SchemaNode:
    """Return the immutable :class:`SchemaNode` tree for *schema*.

    Raises
    ------
    SchemaError
        If a node lacks ``type``, names an unknown kind, carries a
        non-primitive ``enum``/``const``, a length/size/bound limit outside
        float range, or has a ``pattern`` that is not a valid regular
        expression.
    """
    return _parse(schema, "root")
