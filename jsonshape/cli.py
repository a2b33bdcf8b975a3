"""
cli.py - command-line front end: validate JSON documents against a schema
=========================================================================

Usage
-----
    jsonshape SCHEMA [DATA ...] [--output text|json|markdown] [--verbosity LEVEL]

*SCHEMA* is a file path or the name of a bundled schema.  Each *DATA* is a
JSON file; ``-`` (or no *DATA* at all) reads one document from stdin.
Arguments may be read from a file with ``@args.txt``.

Exit status: 0 when every document conforms, 1 when any fails, 2 on usage,
schema or I/O errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence, TextIO

from . import card, loader, validator
from .model import SchemaError, ValidationResult, format_path

__all__ = ["build_arg_parser", "main"]

log = logging.getLogger(__name__)

EXIT_OK, EXIT_INVALID, EXIT_ERROR = 0, 1, 2

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# --------------------------------------------------------------------------- #
# Parser builder                                                              #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jsonshape",
        description="Validate JSON documents against a JSON-Schema-lite schema.",
        fromfile_prefix_chars="@",
        add_help=False,
    )
    p.add_argument("-h", "--help", action="help", help="Show this help message and exit.")
    p.add_argument("schema", metavar="SCHEMA", help="Schema file, or the name of a bundled schema.")
    p.add_argument(
        "data",
        metavar="DATA",
        nargs="*",
        help="JSON documents to validate; '-' or nothing reads stdin.",
    )
    p.add_argument(
        "-o", "--output",
        choices=("text", "json", "markdown"),
        default="text",
        help="Report format (default: text).",
    )
    p.add_argument(
        "--verbosity",
        type=str.upper,
        choices=_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING).",
    )
    return p


# --------------------------------------------------------------------------- #
# Reporting                                                                   #
# --------------------------------------------------------------------------- #

def _render(source: str, result: ValidationResult, style: str) -> str:
    if style == "json":
        return json.dumps({"source": source, **result.to_dict()}, ensure_ascii=False)
    if style == "markdown":
        return card.result_card(result, title=source) + "\n"
    if result.ok:
        return f"{source}: valid"
    return f"{source}: invalid: {format_path(result.path)}: {result.message}"


def _read(source: str, stdin: TextIO) -> Any:
    if source == "-":
        try:
            return json.load(stdin)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON on stdin: {exc}") from exc
    return loader.load_json(source)


# --------------------------------------------------------------------------- #
# Entry point                                                                 #
# --------------------------------------------------------------------------- #

def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=args.verbosity,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        check = loader.compile_file(args.schema)
    except (SchemaError, FileNotFoundError, ValueError) as exc:
        print(f"jsonshape: {exc}", file=stderr)
        return EXIT_ERROR

    status = EXIT_OK
    for source in args.data or ["-"]:
        try:
            document = _read(source, stdin)
        except (FileNotFoundError, ValueError) as exc:
            print(f"jsonshape: {exc}", file=stderr)
            return EXIT_ERROR

        result = check(document)
        log.debug("%s -> %s", source, result.to_dict())
        print(_render(source, result, args.output), file=stdout)
        if not result.ok:
            status = EXIT_INVALID
    return status
