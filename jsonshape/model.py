"""
model.py - immutable value types shared by the schema parser and the engine.

Public API
----------
UNSET
    Marker for "keyword not given" where ``None`` is itself a legal value
    (``const: null``, a received JSON null).

SchemaNode
    Frozen, fully-parsed schema node.  Every facet is an explicit optional
    field, so ``minItems: 0`` is distinguishable from an absent ``minItems``.

ValidationResult
    Success or the first failure (path, message, optional received value).

SchemaError / ValidationError
    Authoring defects and data violations respectively.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

__all__ = [
    "UNSET",
    "KINDS",
    "ErrorPath",
    "SchemaNode",
    "ValidationResult",
    "SchemaError",
    "ValidationError",
    "format_path",
]

# --------------------------------------------------------------------------- #
# Markers & constants                                                         #
# --------------------------------------------------------------------------- #

class _Unset:
    """Singleton standing in for an omitted keyword or value."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

KINDS = ("object", "array", "string", "number", "integer", "boolean", "null")

ErrorPath = Tuple[Union[str, int], ...]


def format_path(path: ErrorPath, *, root: str = "root") -> str:
    """Render *path* the way error messages print it: ``root.users[0].email``."""
    out = root
    for part in path:
        out += f"[{part}]" if isinstance(part, int) else f".{part}"
    return out


# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a schema itself is malformed (an authoring defect)."""


class ValidationError(ValueError):
    """Raised by the raising helpers when data violates its schema."""

    def __init__(self, result: "ValidationResult"):
        super().__init__(f"{format_path(result.path)}: {result.message}")
        self.result = result

    @property
    def path(self) -> ErrorPath:
        return self.result.path

    @property
    def message(self) -> str:
        return self.result.message


# --------------------------------------------------------------------------- #
# Schema node                                                                 #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class SchemaNode:
    types: Tuple[str, ...]
    description: Optional[str] = None

    # object facets
    properties: Optional[Mapping[str, "SchemaNode"]] = None
    required: Tuple[str, ...] = ()
    additional_properties: Union[bool, "SchemaNode"] = True

    # array facets
    items: Optional["SchemaNode"] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    # string facets
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    format: Optional[str] = None
    not_format: Optional[str] = None
    regex: Optional["re.Pattern[str]"] = field(default=None, compare=False, repr=False)

    # number facets (number & integer)
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: Optional[float] = None
    exclusive_maximum: Optional[float] = None

    # cross-kind
    enum: Optional[Tuple[Any, ...]] = None
    const: Any = UNSET

    @property
    def has_const(self) -> bool:
        return self.const is not UNSET

    def children(self) -> Tuple["SchemaNode", ...]:
        """Direct sub-nodes (properties, extras schema, items)."""
        out = list((self.properties or {}).values())
        if isinstance(self.additional_properties, SchemaNode):
            out.append(self.additional_properties)
        if self.items is not None:
            out.append(self.items)
        return tuple(out)


# --------------------------------------------------------------------------- #
# Validation result                                                           #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call.

    ``ok`` is the variant tag.  Failures carry the path from the schema root
    to the offending value, a human-readable message and, for most checks,
    the value (or length) actually found.  ``received`` is ``UNSET`` when the
    failure kind does not echo anything.
    """

    ok: bool
    path: ErrorPath = ()
    message: str = ""
    received: Any = UNSET

    @classmethod
    def success(cls) -> "ValidationResult":
        return _SUCCESS

    @classmethod
    def failure(cls, message: str, path: ErrorPath, received: Any = UNSET) -> "ValidationResult":
        return cls(ok=False, path=tuple(path), message=message, received=received)

    def __bool__(self) -> bool:
        return self.ok

    @property
    def has_received(self) -> bool:
        return self.received is not UNSET

    def raise_for_error(self) -> None:
        if not self.ok:
            raise ValidationError(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view; ``received`` only appears when it was recorded."""
        if self.ok:
            return {"ok": True}
        out: dict[str, Any] = {"ok": False, "path": list(self.path), "message": self.message}
        if self.has_received:
            out["received"] = self.received
        return out


_SUCCESS = ValidationResult(ok=True)
