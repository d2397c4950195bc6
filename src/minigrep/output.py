"""Low-level output helpers: plain text, JSON, Rich tables."""

# ruff: noqa: T201 -- output layer

import json
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text


def print_plain(*messages: object) -> None:
    """Print messages to stdout with the builtin ``print``."""
    print(*messages)


def print_json(data: object) -> None:
    """Print data as a single-line JSON document."""
    print(json.dumps(data, ensure_ascii=False))


def print_table(columns: Sequence[str], rows: Sequence[Sequence[str]], *, title: str | None = None) -> None:
    """Print rows as a Rich table.

    Title and cells are rendered literally; Rich markup in them is not interpreted.
    """
    table = Table(*columns, title=Text(title) if title is not None else None)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))
    Console().print(table)
