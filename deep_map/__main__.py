"""Interface for ``python -m deep_map``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ._version import version
from .exceptions import DeepMapError
from .store import DeepMap


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def _flatten(document: dict[str, Any]) -> dict[str, Any]:
    return dict(DeepMap(document).iter_entries())


def _unflatten(document: dict[str, Any]) -> dict[str, Any]:
    return DeepMap.from_entries(document).unpack()


_COMMANDS = {"flatten": _flatten, "unflatten": _unflatten}


def main(args: Sequence[str] | None = None) -> None:
    """Flatten a JSON object into path/value pairs, or nest it back."""
    parser = ArgumentParser(prog="deep_map", description=main.__doc__)
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("command", choices=sorted(_COMMANDS), help="conversion to apply")
    _ = parser.add_argument("file", nargs="?", default="-", help="JSON object to read, or - for stdin (default)")
    _ = parser.add_argument("--indent", type=int, default=None, help="indentation of the JSON output")
    options = parser.parse_args(args)

    try:
        text = sys.stdin.read() if options.file == "-" else Path(options.file).read_text(encoding="utf-8")
    except OSError as error:
        parser.error(f"cannot read {options.file}: {error}")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as error:
        parser.error(f"invalid JSON input: {error}")

    if not isinstance(document, dict):
        parser.error("input must be a JSON object")

    try:
        result = _COMMANDS[options.command](document)
    except DeepMapError as error:
        parser.error(str(error))

    json.dump(result, sys.stdout, indent=options.indent)
    _ = sys.stdout.write("\n")


if __name__ == "__main__":
    main()
