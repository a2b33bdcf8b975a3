"""
loader.py - read schemas and documents from disk or from package data.

Public API
----------
load_json(path)      : parse one JSON document, with crisp errors
load_schema(path)    : fresh copy of a schema file or bundled schema
compile_file(path)   : load_schema + compile
"""

from __future__ import annotations

import copy
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from . import validator

__all__ = ["load_json", "load_schema", "compile_file"]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def load_json(path: str | Path) -> Any:
    """Read & parse a JSON file, raising crisp errors on failure."""
    p = Path(path)
    try:
        with p.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"File not found: {p}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {p}: {exc}") from exc


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_schema(path: str | Path) -> dict:
    """Return a fresh copy of the schema at *path*.

    *path* is tried as a file on disk first, then as the name of a schema
    bundled in ``jsonshape.schemas`` (basename first, original string second).
    """
    p = Path(path)

    # 1) direct file on disk ------------------------------------------------
    if p.is_file():
        log.info("loading schema from %s", p)
        return copy.deepcopy(load_json(p))

    # 2) bundled resource (exact string or basename) -----------------------
    pkg = resources.files("jsonshape.schemas")
    for name in (p.name, str(path)):
        try:
            text = pkg.joinpath(name).read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError):
            continue
        log.info("loading bundled schema %s", name)
        try:
            return copy.deepcopy(json.loads(text))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in bundled schema {name}: {exc}") from exc

    # 3) give up -----------------------------------------------------------
    raise FileNotFoundError(f"Schema '{path}' not found on disk or in package data")


def compile_file(path: str | Path) -> validator.Validator:
    """Load the schema at *path* and compile it."""
    return validator.compile(load_schema(path))
