"""Read the target file and search it."""

import logging
from pathlib import Path

from mm_result import Result

from .config import Config
from .search import LineMatch, search_content

logger = logging.getLogger(__name__)

FILE_READ_ERROR = "file_read_error"


def _read_text(path: str | Path) -> str:
    """Read and strictly decode a UTF-8 file; raises ``OSError`` or ``UnicodeDecodeError``."""
    data = Path(path).read_bytes()
    content = data.decode("utf-8")
    logger.debug("read %d bytes from %s", len(data), path)
    return content


def read_content(path: str | Path) -> Result[str]:
    """Read a whole file as UTF-8 text.

    Line terminators are left untouched. Any OS or decoding failure is returned as
    a ``file_read_error`` carrying the original exception.
    """
    try:
        return Result.ok(_read_text(path))
    except (OSError, UnicodeDecodeError) as e:
        return Result.err((FILE_READ_ERROR, e), context={"path": str(path), "reason": str(e)})


def run(config: Config) -> Result[list[LineMatch]]:
    """Search the file named by ``config.path`` for ``config.query``."""
    try:
        content = _read_text(config.path)
    except (OSError, UnicodeDecodeError) as e:
        return Result.err((FILE_READ_ERROR, e), context={"path": config.path, "reason": str(e)})

    matches = search_content(config, content)
    logger.debug("found %d matching lines for %r", len(matches), config.query)
    return Result.ok(matches)
