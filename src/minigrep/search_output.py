"""Dual-mode (JSON / display) output for search results."""

# ruff: noqa: T201 -- output layer

import sys
from typing import NoReturn

import typer

from .config import Config
from .output import print_json, print_plain, print_table
from .search import LineMatch


class SearchOutput:
    """Output handler for search results and errors.

    JSON mode outputs structured envelopes (``{"ok": true, "data": ...}``).
    Display mode prints one ``<index>: <line>`` row per match, or a Rich table
    when ``table_mode`` is set.
    """

    def __init__(self, *, json_mode: bool, table_mode: bool = False) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; takes precedence over ``table_mode``.
            table_mode: If True, display matches as a Rich table.

        """
        self.json_mode = json_mode
        self.table_mode = table_mode

    def matches(self, config: Config, results: list[LineMatch]) -> None:
        """Output the matches found for ``config``."""
        if self.json_mode:
            data = {
                "query": config.query,
                "path": config.path,
                "case_insensitive": config.case_insensitive,
                "matches": [{"index": m.index, "line": m.line} for m in results],
            }
            print_json({"ok": True, "data": data})
        elif self.table_mode:
            print_table(["Line", "Text"], [[str(m.index), m.line] for m in results], title=config.path)
        else:
            for index, line in results:
                print_plain(f"{index}: {line}")

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or display format and exit with code 1."""
        if self.json_mode:
            print_json({"ok": False, "error": code, "message": message})
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(1)
