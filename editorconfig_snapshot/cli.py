from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable

from .config_loader import ConfigLoader
from .config_model import EditorConfigFile
from .config_parser import RESERVED_KEYS, RESERVED_VALUES

logger = logging.getLogger(__name__)


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    if args.command == "show":
        return _handle_show(args)
    if args.command == "get":
        return _handle_get(args)
    if args.command == "reserved":
        return _handle_reserved(args)
    parser.error("No command specified")
    return 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ecsnap", description="Read properties from EditorConfig files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    show = sub.add_parser("show", help="Print every property of an EditorConfig file")
    show.add_argument("path", help="Path to .editorconfig")
    show.add_argument("--format", choices=("text", "json"), default="text", help="Output format")

    get = sub.add_parser("get", help="Print the value of a single property")
    get.add_argument("path", help="Path to .editorconfig")
    get.add_argument("key", help="Property name (case-insensitive)")

    sub.add_parser("reserved", help="List reserved keys and values")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _handle_show(args: argparse.Namespace) -> int:
    snapshot = _load(args.path)
    if snapshot is None:
        return 2

    if args.format == "json":
        _print_json(snapshot)
    else:
        _print_text(snapshot)
    return 0


def _handle_get(args: argparse.Namespace) -> int:
    snapshot = _load(args.path)
    if snapshot is None:
        return 2

    value = snapshot.get(args.key)
    if value is None:
        print(f"Key not found: {args.key}", file=sys.stderr)
        return 1
    print(value)
    return 0


def _handle_reserved(_: argparse.Namespace) -> int:
    print("Reserved keys:")
    for key in sorted(RESERVED_KEYS):
        print(f"  {key}")
    print("Reserved values:")
    for value in sorted(RESERVED_VALUES):
        print(f"  {value}")
    return 0


def _load(path: str) -> EditorConfigFile | None:
    if not Path(path).is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return None
    snapshot = ConfigLoader(path).load()
    logger.debug("Parsed %d properties from %s", len(snapshot), path)
    return snapshot


def _print_json(snapshot: EditorConfigFile) -> None:
    payload = {key: snapshot[key] for key in sorted(snapshot)}
    json.dump(payload, sys.stdout, indent=2)
    print()


def _print_text(snapshot: EditorConfigFile) -> None:
    if snapshot.is_empty:
        print("(no properties)")
        return
    for key in sorted(snapshot):
        print(f"{key} = {snapshot[key]}")


if __name__ == "__main__":
    sys.exit(main())
