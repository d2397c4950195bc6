"""Minimal substring search over the lines of a text file."""

from .config import Config as Config
from .config import ConfigError as ConfigError
from .config import case_insensitive_env_unset as case_insensitive_env_unset
from .run import read_content as read_content
from .run import run as run
from .search import LineMatch as LineMatch
from .search import search as search
from .search import search_case_insensitive as search_case_insensitive
from .search import search_content as search_content
from .search import split_lines as split_lines
from .search_output import SearchOutput as SearchOutput
