"""Command line interface for inspecting and editing the settings file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .api import open_settings
from .log_utils import setup_logging
from .paths import DEFAULT_SETTINGS_NAME, ensure_settings_file
from .settings import FIELDS

EXIT_OK = 0
EXIT_IO = 1
EXIT_USAGE = 2


def _parse_value(raw: str) -> Any:
    # JSON when it parses (numbers, null, objects), plain string otherwise.
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def parse_assignments(items: List[str]) -> Dict[str, Any]:
    """Turn ``KEY=VALUE`` strings into a partial settings document.

    Dotted keys build nested mappings:
    ``languages.python.path=/usr/bin/python3`` ->
    ``{"languages": {"python": {"path": "/usr/bin/python3"}}}``.
    """

    patch: Dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {item!r}")
        parts = key.split(".")
        cursor = patch
        for part in parts[:-1]:
            nested = cursor.setdefault(part, {})
            if not isinstance(nested, dict):
                raise ValueError(f"Conflicting assignment for {key!r}")
            cursor = nested
        cursor[parts[-1]] = _parse_value(raw)
    return patch


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, sort_keys=True)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Inspect and update the application settings file.")
    ap.add_argument("--file", default=DEFAULT_SETTINGS_NAME,
                    help="Settings file (relative paths resolve against the working directory)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details")

    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("show", help="Print the full settings document")
    p_get = sub.add_parser("get", help="Print one setting")
    p_get.add_argument("key", choices=sorted(FIELDS))
    p_set = sub.add_parser("set", help="Apply KEY=VALUE updates and save")
    p_set.add_argument("assignments", nargs="+", metavar="KEY=VALUE")
    sub.add_parser("path", help="Print the resolved settings file path")

    args = ap.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "path":
            print(ensure_settings_file(args.file))
            return EXIT_OK

        store = open_settings(args.file)
        if args.command == "show":
            print(_dump(store.current.to_dict()))
        elif args.command == "get":
            print(_dump(store.current.get(args.key)))
        elif args.command == "set":
            store.apply_update(parse_assignments(args.assignments))
            print(_dump(store.current.to_dict()))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IO
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
