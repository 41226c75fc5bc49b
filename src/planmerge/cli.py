"""Command-line interface for planmerge."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import uvicorn

from .config import settings


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="planmerge - Smart lesson-plan table import"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start the web server")
    server_parser.add_argument(
        "--host", default=settings.host, help=f"Host to bind to (default: {settings.host})"
    )
    server_parser.add_argument(
        "--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})"
    )
    server_parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload for development"
    )

    # Import commands
    for name, help_text in (
        ("merge", "Merge an imported table into the current table"),
        ("report", "Show what a merge would match without merging"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--current", "-c", help="JSON file with the current table")
        _add_import_arguments(sub)

    replace_parser = subparsers.add_parser(
        "replace", help="Build a new table from an imported table"
    )
    _add_import_arguments(replace_parser)

    init_parser = subparsers.add_parser("init", help="Print the starting table for a period")
    init_parser.add_argument("--period", "-p", default="weekly", help="Period type")
    init_parser.add_argument("--output", "-o", help="Write JSON here instead of stdout")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        run_server(args.host, args.port, args.reload)
    elif args.command in ("merge", "report", "replace", "init"):
        try:
            payload = run_import_command(args)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        _write_json(payload, args.output)
    else:
        parser.print_help()
        sys.exit(1)


def _add_import_arguments(sub: argparse.ArgumentParser):
    sub.add_argument("--table", "-t", required=True, help="JSON file with {headers, rows}")
    sub.add_argument("--period", "-p", default="weekly", help="Period type (default: weekly)")
    sub.add_argument("--labels", "-l", help="JSON file with default column labels")
    sub.add_argument("--output", "-o", help="Write JSON here instead of stdout")


def _read_json(path: Optional[str]) -> Any:
    if not path:
        return None
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)


def _write_json(payload: Any, output: Optional[str]):
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def run_import_command(args: argparse.Namespace) -> dict:
    """Run merge, report, replace or init and return the JSON payload."""
    from .merge import (
        default_labels_for,
        generate_import_report,
        initialize_table,
        replace_table_with_new,
        smart_table_import,
    )

    if args.command == "init":
        return initialize_table(args.period).to_payload()

    table = _read_json(args.table)
    labels = _read_json(args.labels)
    if labels is None:
        labels = default_labels_for(args.period)

    if args.command == "replace":
        return replace_table_with_new(table, args.period, labels).to_payload()

    current = _read_json(args.current)
    if args.command == "report":
        report = generate_import_report(current, table, args.period, labels)
        return report.model_dump(by_alias=True)
    return smart_table_import(current, table, args.period, labels).to_payload()


def run_server(host: str, port: int, reload: bool):
    """Run the web server."""
    uvicorn.run(
        "planmerge.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    main()
