"""Search several files in parallel threads; each call works on its own content."""

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Annotated

import typer

from minigrep import Config, run
from minigrep.output import print_plain
from minigrep.typer_plus import TyperPlus

app = TyperPlus()


@app.command()
def main(
    query: Annotated[str, typer.Argument(help="Text to search for.")],
    paths: Annotated[list[Path], typer.Argument(help="Files to search.")],
    ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Case-insensitive matching.")] = False,
) -> None:
    """Print matches from every file, prefixed with the file name."""
    configs = [Config(query=query, path=str(path), case_insensitive=ignore_case) for path in paths]
    with ThreadPoolExecutor() as pool:
        results = list(pool.map(run, configs))

    for config, result in zip(configs, results, strict=True):
        if result.is_err():
            print(f"{config.path}: {result.error}", file=sys.stderr)  # noqa: T201
            continue
        for index, line in result.unwrap():
            print_plain(f"{config.path}:{index}: {line}")


if __name__ == "__main__":
    app()
