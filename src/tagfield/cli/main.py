# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""tagfield CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..editor import TagEditor
from ..log import setup_logging
from ..models import ItemChange, Option


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Headless tag field: add tags and print the resulting form state")
    parser.add_argument("tags", nargs="*", help="Tag text to add; delimiter separated text is split")
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="VALUE[=LABEL]",
        help="Autocomplete option (repeatable)",
    )
    parser.add_argument("--single", action="store_true", help="Allow at most one tag")
    parser.add_argument("--required", action="store_true", help="Mark the field as required")
    parser.add_argument("--name", default="tags", help="Form field name (default: tags)")
    parser.add_argument("--query", help="Print suggestions for this query after adding tags")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument("--log-level", help="Logging level (default: TAGFIELD_LOG_LEVEL or WARNING)")
    return parser


def _parse_option(raw: str) -> Option:
    value, sep, label = raw.partition("=")
    return Option(value=value, label=label if sep else "")


def run(args: argparse.Namespace) -> dict[str, Any]:
    editor = TagEditor(
        name=args.name,
        multiple=not args.single,
        required=args.required,
        options=[_parse_option(raw) for raw in args.option],
    )
    updates: list[dict[str, Any]] = []

    def _record(change: ItemChange) -> None:
        updates.append(change.to_dict())

    editor.on("update", _record)
    if args.tags:
        editor.add(args.tags)

    validity = editor.report_validity()
    form_entries = getattr(editor.form, "entries", [])
    return {
        "values": editor.tags,
        "labels": editor.labels,
        "form": [list(entry) for entry in form_entries],
        "validity": validity.to_dict(),
        "updates": updates,
        "suggestions": editor.suggest(args.query) if args.query else [],
    }


def _print_json(payload: dict[str, Any]) -> None:
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(payload: dict[str, Any]) -> None:
    values = payload.get("values") or []
    validity = payload.get("validity") or {}
    print(f"[tagfield] Tags ({len(values)}): {', '.join(values) if values else '-'}")
    for name, value in payload.get("form") or []:
        print(f"  {name}={value!r}")
    if validity.get("valid"):
        print("Validity: ok")
    else:
        print(f"Validity: invalid ({validity.get('message')})")
    suggestions = payload.get("suggestions") or []
    if suggestions:
        print(f"Suggestions: {', '.join(suggestions)}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    payload = run(args)

    if args.json:
        _print_json(payload)
    else:
        _pretty_print(payload)

    return 0 if payload["validity"]["valid"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
