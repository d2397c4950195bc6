"""Search configuration resolved from command-line arguments and the environment."""

import logging
import os
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# Presence of this variable turns case-insensitive matching OFF; its value is ignored.
CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"


class ConfigError(StrEnum):
    """Error codes returned by ``Config.resolve``."""

    MISSING_QUERY = "missing_query"
    MISSING_FILENAME = "missing_filename"

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        return _CONFIG_ERROR_MESSAGES[self]


_CONFIG_ERROR_MESSAGES = {
    ConfigError.MISSING_QUERY: "did not get a query string",
    ConfigError.MISSING_FILENAME: "did not get a filename",
}


def case_insensitive_env_unset(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when ``CASE_INSENSITIVE`` is absent from the environment."""
    if environ is None:
        environ = os.environ
    return CASE_INSENSITIVE_ENV not in environ


class Config(BaseModel):
    """Validated, immutable search configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str
    path: str
    case_insensitive: bool

    @classmethod
    def resolve(cls, args: Sequence[str], *, case_insensitive_env_unset: bool) -> Result[Self]:
        """Build a config from the full argument vector.

        Args:
            args: Arguments as received by the process; element 0 is the program name.
            case_insensitive_env_unset: Whether ``CASE_INSENSITIVE`` is absent from the
                environment. Absent means case-insensitive matching.

        Extra arguments after the filename are ignored.

        """
        rest = iter(args[1:])
        query = next(rest, None)
        if query is None:
            return Result.err(ConfigError.MISSING_QUERY)
        path = next(rest, None)
        if path is None:
            return Result.err(ConfigError.MISSING_FILENAME)

        config = cls(query=query, path=path, case_insensitive=case_insensitive_env_unset)
        logger.debug("resolved config: %r", config)
        return Result.ok(config)
