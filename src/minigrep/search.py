"""Substring line matching over in-memory text content."""

from typing import NamedTuple

from .config import Config


class LineMatch(NamedTuple):
    """A matching line and its zero-based position in the content."""

    index: int
    line: str


def split_lines(content: str) -> list[str]:
    """Split content into lines on ``\\n`` and ``\\r\\n`` terminators.

    A trailing terminator does not produce an empty last line. A lone ``\\r`` is
    kept as part of the line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def search(query: str, content: str) -> list[LineMatch]:
    """Return lines containing ``query``, compared case-sensitively."""
    return [LineMatch(i, line) for i, line in enumerate(split_lines(content)) if query in line]


def search_case_insensitive(query: str, content: str) -> list[LineMatch]:
    """Return lines containing ``query`` ignoring case; line text keeps its original casing."""
    query = query.lower()
    return [LineMatch(i, line) for i, line in enumerate(split_lines(content)) if query in line.lower()]


def search_content(config: Config, content: str) -> list[LineMatch]:
    """Run the matcher selected by ``config.case_insensitive``."""
    if config.case_insensitive:
        return search_case_insensitive(config.query, content)
    return search(config.query, content)
