"""Command-line entry point: ``minigrep QUERY FILENAME``."""

import logging
import os
from typing import Annotated

import typer

from .config import Config, ConfigError, case_insensitive_env_unset
from .run import FILE_READ_ERROR, run
from .search_output import SearchOutput
from .typer_plus import TyperPlus

app = TyperPlus(package_name="minigrep")


@app.command(context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    args: Annotated[
        list[str] | None,
        typer.Argument(metavar="QUERY FILENAME", help="Text to search for and the file to search; extra arguments are ignored."),
    ] = None,
    json_mode: Annotated[bool, typer.Option("--json", help="Output results as a JSON envelope.")] = False,
    table_mode: Annotated[bool, typer.Option("--table", help="Display matches as a table.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr.")] = False,
) -> None:
    """Print every line of FILENAME that contains QUERY, prefixed by its zero-based line index.

    Matching ignores case unless the CASE_INSENSITIVE environment variable is set.
    Options go before QUERY; everything from QUERY on is taken as arguments.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    out = SearchOutput(json_mode=json_mode, table_mode=table_mode)

    argv = [ctx.info_name or "minigrep", *(args or [])]
    config_result = Config.resolve(argv, case_insensitive_env_unset=case_insensitive_env_unset(os.environ))
    if config_result.is_err():
        error = ConfigError(config_result.error)
        out.print_error_and_exit(error, f"problem parsing arguments: {error.message}")
    config = config_result.unwrap()

    result = run(config)
    if result.is_err():
        context = result.context or {}
        out.print_error_and_exit(FILE_READ_ERROR, f"application error: can't read {config.path}: {context.get('reason')}")

    out.matches(config, result.unwrap())
