"""
formats.py - string ``format`` predicates.

Every predicate is a pure ``str -> bool`` function.  The engine reaches them
through :func:`is_format_valid`; they are also public for direct reuse.

Date and time checks are syntactic (RFC 3339 grammar with per-field ranges);
they do not consult a calendar, so ``2025-02-30`` is accepted.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Mapping
from urllib.parse import urlsplit

__all__ = [
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
]

# --------------------------------------------------------------------------- #
# Regular expressions                                                         #
# --------------------------------------------------------------------------- #

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_LABEL_RE = re.compile(r"(?!-)[A-Za-z0-9-]{1,63}(?<!-)")

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1?[0-9]{1,2})"
_IPV4_RE = re.compile(rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}")

_H16 = r"[A-Fa-f0-9]{1,4}"
_IPV6_RE = re.compile(
    r"(?:"
    rf"(?:{_H16}:){{7}}{_H16}"
    rf"|(?:{_H16}:){{1,7}}:"
    rf"|:(?::{_H16}){{1,7}}"
    rf"|(?:{_H16}:){{1,6}}:{_H16}"
    rf"|(?:{_H16}:){{1,5}}(?::{_H16}){{1,2}}"
    rf"|(?:{_H16}:){{1,4}}(?::{_H16}){{1,3}}"
    rf"|(?:{_H16}:){{1,3}}(?::{_H16}){{1,4}}"
    rf"|(?:{_H16}:){{1,2}}(?::{_H16}){{1,5}}"
    rf"|{_H16}:(?::{_H16}){{1,6}}"
    r")(?:%.+)?"
)

_FULL_DATE = r"[0-9]{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12][0-9]|3[01])"
_PARTIAL_TIME = r"(?:[01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9](?:\.[0-9]+)?"
_OFFSET = r"(?:Z|[+-](?:[01][0-9]|2[0-3]):[0-5][0-9])"

_DATE_RE = re.compile(_FULL_DATE)
_DATE_TIME_RE = re.compile(rf"{_FULL_DATE}T{_PARTIAL_TIME}{_OFFSET}")
_TIME_RE = re.compile(rf"{_PARTIAL_TIME}{_OFFSET}?")

# Schemes whose URIs must carry a "//host" authority.
_AUTHORITY_SCHEMES = frozenset({"http", "https", "ftp"})

# --------------------------------------------------------------------------- #
# Predicates                                                                  #
# --------------------------------------------------------------------------- #

def is_uuid(value: str) -> bool:
    return _UUID_RE.fullmatch(value) is not None


def is_email(value: str) -> bool:
    """Conservative ``local@domain.tld`` heuristic, not full RFC 5322."""
    return _EMAIL_RE.fullmatch(value) is not None


def is_uri(value: str) -> bool:
    """Return True iff *value* parses as a URI with a scheme.

    For ``http``, ``https`` and ``ftp`` the input must also spell out
    ``<scheme>://`` literally and name a host; other schemes (``mailto:``,
    ``urn:``, ``data:``) only need a scheme.
    """
    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError on a malformed or out-of-range port
    except ValueError:
        return False

    scheme = parts.scheme
    if not scheme:
        return False
    if scheme in _AUTHORITY_SCHEMES:
        prefix = f"{scheme}://"
        if not value.startswith(prefix) or value[len(prefix):len(prefix) + 1] == "/":
            return False
        host = parts.hostname or ""
        return bool(host) and not any(ch.isspace() for ch in host)
    return True


def is_hostname(value: str) -> bool:
    if len(value) > 253:
        return False
    return all(_LABEL_RE.fullmatch(label) for label in value.split("."))


def is_ipv4(value: str) -> bool:
    return _IPV4_RE.fullmatch(value) is not None


def is_ipv6(value: str) -> bool:
    """Full eight-group or single ``::`` form, optional ``%zone`` suffix."""
    return _IPV6_RE.fullmatch(value) is not None


def is_date_time(value: str) -> bool:
    return _DATE_TIME_RE.fullmatch(value) is not None


def is_date(value: str) -> bool:
    return _DATE_RE.fullmatch(value) is not None


def is_time(value: str) -> bool:
    """Seconds are mandatory, the zone is optional."""
    return _TIME_RE.fullmatch(value) is not None


# --------------------------------------------------------------------------- #
# Registry & dispatch                                                         #
# --------------------------------------------------------------------------- #

FORMATS: Mapping[str, Callable[[str], bool]] = MappingProxyType({
    "uuid":      is_uuid,
    "email":     is_email,
    "uri":       is_uri,
    "hostname":  is_hostname,
    "ipv4":      is_ipv4,
    "ipv6":      is_ipv6,
    "date-time": is_date_time,
    "date":      is_date,
    "time":      is_time,
})


def is_format_valid(name: str, value: str, expected: bool = True) -> bool:
    """Return ``FORMATS[name](value) == expected``.

    Unknown format names are accepted whatever *expected* is, so both
    ``format`` and ``not.format`` pass for names outside the registry.
    """
    predicate = FORMATS.get(name)
    if predicate is None:
        return True
    return predicate(value) == expected
