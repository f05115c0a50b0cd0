"""Line reader for automaton descriptions and input-string batches."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Iterator

from dfasim.utils.logging import get_logger
from dfasim.utils.result import Err, Ok, ReadError, Result

logger = get_logger("reader.lines")

DEFAULT_COMMENT_PREFIX = "#"


def is_noise(line: str, comment_prefix: str = DEFAULT_COMMENT_PREFIX) -> bool:
    """A line is noise when it is empty or starts with the comment prefix."""
    return not line or line.startswith(comment_prefix)


def significant_lines(
    lines: Iterable[str],
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> Iterator[str]:
    """
    Yield non-comment, non-blank lines with their line terminator removed.

    Only the terminator is stripped; leading and trailing blanks are part of
    the line. A whitespace-only line is therefore significant, which is how
    an empty accepting-state list is written.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if is_noise(line, comment_prefix):
            continue
        yield line


def split_lines(text: str, comment_prefix: str = DEFAULT_COMMENT_PREFIX) -> list[str]:
    """Significant lines of an in-memory text, split the way read_lines splits a file."""
    return list(significant_lines(io.StringIO(text, newline=""), comment_prefix))


def read_lines(
    path: Path,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> Result[list[str], ReadError]:
    """
    Read the significant lines of a file.

    Args:
        path: File to read
        comment_prefix: Prefix marking comment lines

    Returns:
        Result with the lines in file order or a ReadError
    """
    path = Path(path)

    if not path.is_file():
        logger.warning("file_read_failed", path=str(path), reason="not_found")
        return Err(ReadError(
            path=str(path),
            message="file not found or is not a regular file",
        ))

    try:
        with open(path, encoding="utf-8", newline="") as f:
            lines = list(significant_lines(f, comment_prefix))
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("file_read_failed", path=str(path), error=str(e))
        return Err(ReadError(
            path=str(path),
            message="file could not be read",
            cause=e,
        ))

    logger.debug("file_read", path=str(path), lines=len(lines))
    return Ok(lines)
