"""Reading automaton descriptions and input strings from text sources."""

from dfasim.reader.lines import (
    DEFAULT_COMMENT_PREFIX,
    is_noise,
    read_lines,
    significant_lines,
    split_lines,
)

__all__ = [
    "DEFAULT_COMMENT_PREFIX",
    "is_noise",
    "read_lines",
    "significant_lines",
    "split_lines",
]
