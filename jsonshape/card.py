# jsonshape/card.py
from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from .model import ValidationResult, format_path

__all__ = ["to_markdown_card", "result_card"]


def _scalar(v: Any) -> str:
    """JSON spelling for scalars, ``str`` for the rest."""
    if v is None or isinstance(v, bool):
        return json.dumps(v)
    return str(v)


def _bullets(values: Sequence[Any]) -> str:
    return "\n".join(f"- {_scalar(item)}" for item in values)


def _heading(key: str) -> str:
    return key.replace("_", " ").replace("-", " ").title()


def to_markdown_card(data: Mapping[str, Any], *, heading_level: int = 2) -> str:
    """
    Render *data* as a Markdown card.

    Every top-level key becomes a heading; mappings become ``**key**: value``
    bullets, sequences plain bullets, and scalars a single line.

    Parameters
    ----------
    data : Mapping[str, Any]
        Mapping with JSON-like values.
    heading_level : int, default 2
        Markdown heading level for the top-level keys.
    """
    marker = "#" * heading_level
    sections: list[str] = []
    for key, value in data.items():
        sections.append(f"{marker} {_heading(str(key))}")
        if isinstance(value, Mapping):
            sections.append(_bullets([f"**{k}**: {_scalar(v)}" for k, v in value.items()]))
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            sections.append(_bullets(value))
        else:
            sections.append(_scalar(value))
        sections.append("")
    return "\n".join(sections).rstrip()


def result_card(result: ValidationResult, *, title: str = "Validation Result", heading_level: int = 2) -> str:
    """Markdown summary of one :class:`ValidationResult`."""
    body: dict[str, Any] = {"status": "valid" if result.ok else "invalid"}
    if not result.ok:
        body["path"] = format_path(result.path)
        body["message"] = result.message
        if result.has_received:
            body["received"] = result.received
    header = "#" * max(heading_level - 1, 1)
    return f"{header} {title}\n\n" + to_markdown_card(body, heading_level=heading_level)
