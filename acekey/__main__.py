"""
AceKey Selection Shell

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Sequence

from prompt_toolkit import PromptSession
from rich.table import Table

from acekey.allocator import Assignment
from acekey.catalog import Catalog, find_catalog, load_catalog
from acekey.completer import AceKeyCompleter
from acekey.console import console
from acekey.decorate import decorate_form
from acekey.engine import assign_ace_keys
from acekey.exceptions import CatalogError
from acekey.logger import logger
from acekey.parsers import get_arg_parsers
from acekey.shell import AceShell
from acekey.themes import OneColors
from acekey.utils import setup_logging
from acekey.validators import selected_index, unique_key_validator
from acekey.version import __version__


def resolve_catalog(config: str | None, labels: Sequence[str] = ()) -> Catalog:
    """Inline labels win over a catalog file; without either, search the usual places."""
    if labels:
        return Catalog.from_labels(labels)
    path = Path(config) if config else find_catalog()
    if path is None:
        raise CatalogError(
            "No catalog found. Pass --config, list labels, or create acekey.yaml."
        )
    return load_catalog(path)


def assignments_table(
    labels: Sequence[str], typed: str, assignments: Sequence[Assignment]
) -> Table:
    table = Table(title=f"typed: {typed!r}" if typed else "initial keys", show_lines=False)
    table.add_column("#", style="ace.linenum", justify="right")
    table.add_column("Label")
    table.add_column("Key", style="ace.key")
    for assignment in assignments:
        label = labels[assignment.index]
        table.add_row(
            str(assignment.index),
            decorate_form(label, typed, assignment.prefix),
            assignment.prefix or "⏎",
        )
    return table


def run_assign(cli_args: Namespace) -> int:
    labels = cli_args.labels
    assignments = assign_ace_keys(labels, cli_args.typed)
    if assignments is None:
        console.print(f"[{OneColors.LIGHT_YELLOW}]⚠️ No labels match '{cli_args.typed}'.")
        return 1
    if cli_args.json:
        payload = [
            {"index": a.index, "label": labels[a.index], "prefix": a.prefix}
            for a in assignments
        ]
        console.print_json(json.dumps(payload))
    else:
        console.print(assignments_table(labels, cli_args.typed, assignments))
    return 0


def run_pick(cli_args: Namespace) -> int:
    labels = cli_args.labels
    session: PromptSession = PromptSession(
        message=cli_args.message,
        completer=AceKeyCompleter(labels),
        validator=unique_key_validator(labels),
        complete_while_typing=True,
        validate_while_typing=False,
    )
    try:
        text = session.prompt()
    except (EOFError, KeyboardInterrupt):
        logger.info("EOF or KeyboardInterrupt. Exiting pick.")
        return 130
    index = selected_index(labels, text)
    if index is None:
        return 1
    console.print(labels[index], markup=False, highlight=False)
    return 0


def run_shell(cli_args: Namespace, catalog: Catalog) -> int:
    shell = AceShell(catalog, title=cli_args.title or "acekey")
    result = asyncio.run(shell.run())
    if result is None:
        return 130
    console.print(" ".join(result), markup=False, highlight=False)
    return 0


def main(args: Sequence[str] | None = None) -> Any:
    parsers = get_arg_parsers()
    cli_args = parsers.parse_args(args)

    setup_logging(
        log_filename=cli_args.debug_log,
        json_log_to_file=cli_args.json_log,
        console_log_level=logging.DEBUG if cli_args.verbose else logging.WARNING,
    )

    if cli_args.command == "version" or cli_args.version:
        console.print(f"[{OneColors.GREEN_b}]acekey v{__version__}[/]")
        sys.exit(0)

    if cli_args.command == "assign":
        sys.exit(run_assign(cli_args))

    if cli_args.command == "pick":
        sys.exit(run_pick(cli_args))

    if cli_args.command is None and find_catalog() is None:
        parsers.root.print_help()
        sys.exit(0)

    config = getattr(cli_args, "config", None)
    labels = getattr(cli_args, "labels", [])
    try:
        catalog = resolve_catalog(config, labels)
    except CatalogError as error:
        console.print(f"[{OneColors.DARK_RED}]❌ Error: {error}[/]")
        sys.exit(1)
    if cli_args.command is None:
        cli_args.title = "acekey"
    sys.exit(run_shell(cli_args, catalog))


if __name__ == "__main__":
    main()
