"""
jsonshape – structural validation of JSON-like data against a compact schema.
"""
from .model import (
    UNSET,
    SchemaError,
    SchemaNode,
    ValidationError,
    ValidationResult,
    format_path,
)
from .schema import parse_schema
from .validator import compile, validate
from .formats import (
    FORMATS,
    is_date,
    is_date_time,
    is_email,
    is_format_valid,
    is_hostname,
    is_ipv4,
    is_ipv6,
    is_time,
    is_uri,
    is_uuid,
)
from .loader import compile_file, load_schema
from .card import result_card, to_markdown_card

__all__ = [
    "UNSET",
    "SchemaError",
    "SchemaNode",
    "ValidationError",
    "ValidationResult",
    "format_path",
    "parse_schema",
    "compile",
    "validate",
    "FORMATS",
    "is_format_valid",
    "is_uuid",
    "is_email",
    "is_uri",
    "is_hostname",
    "is_ipv4",
    "is_ipv6",
    "is_date_time",
    "is_date",
    "is_time",
    "compile_file",
    "load_schema",
    "result_card",
    "to_markdown_card",
]
