"""TyperPlus — single-command Typer app with built-in --version support.

Pass ``package_name`` at init and a ``--version`` / ``-V`` flag is injected
into the registered command, so the app stays in single-command mode::

    app = TyperPlus(package_name="minigrep")

    @app.command()
    def main(query: str) -> None: ...

"""

import importlib.metadata
import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
from typer import Typer

from .output import print_plain


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback for a Typer CLI app.

    Args:
        package_name: The installed package name to look up the version for.

    """

    def version_callback(value: bool) -> None:
        """Print the version and exit when --version is passed."""
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


class TyperPlus(Typer):
    """Typer subclass that adds ``--version`` to its command.

    Args:
        package_name: If set, ``--version`` / ``-V`` prints ``{package_name}: {version}``
            and exits. Defining a ``_version`` parameter in the command skips injection.
        **kwargs: Forwarded to ``Typer.__init__``.

    """

    def __init__(self, *, package_name: str | None = None, **kwargs: Any) -> None:  # noqa: ANN401 — must forward arbitrary kwargs to Typer
        """Store the package name and disable pretty exceptions by default."""
        self._package_name = package_name
        kwargs.setdefault("pretty_exceptions_enable", False)
        super().__init__(**kwargs)

    def command(self, name: str | None = None, **kwargs: Any) -> Callable[..., Any]:  # noqa: ANN401 — must forward arbitrary kwargs to Typer.command
        """Register a command, injecting ``--version`` if ``package_name`` is set."""
        decorator = super().command(name, **kwargs)

        package_name = self._package_name
        if not package_name:
            return decorator

        def injecting_decorator(f: Callable[..., Any]) -> Callable[..., Any]:
            sig = inspect.signature(f)
            if "_version" in sig.parameters:
                return decorator(f)

            version_param = inspect.Parameter(
                "_version",
                inspect.Parameter.KEYWORD_ONLY,
                default=typer.Option(
                    None,
                    "--version",
                    "-V",
                    callback=create_version_callback(package_name),
                    is_eager=True,
                    help="Show version and exit.",
                ),
                annotation=bool | None,
            )

            @wraps(f)
            def wrapper(*args: Any, _version: bool | None = None, **f_kwargs: Any) -> Any:  # noqa: ANN401 — must match arbitrary command signatures
                return f(*args, **f_kwargs)

            wrapper.__signature__ = sig.replace(parameters=[*sig.parameters.values(), version_param])  # type: ignore[attr-defined]
            wrapper.__annotations__ = {**f.__annotations__, "_version": bool | None}
            decorator(wrapper)
            # the undecorated function stays directly callable
            return f

        return injecting_decorator

