"""
Pytest configuration and shared fixtures for dfasim tests.

Provides the automaton descriptions used throughout the suite.
"""

from pathlib import Path

import pytest

from dfasim.automaton.builder import build_from_text


# One "a" followed by any number of "b"s; q0 has no transition on "b".
AB_STAR = """\
# start state
q0
# states
q0 q1
# symbols
a b
# accepting states
q1
# transitions
q0 a q1
q1 b q1
"""

# Binary numbers divisible by three, with a complete transition table.
DIV3 = """\
r0
r0 r1 r2
0 1
r0
r0 0 r0
r0 1 r1
r1 0 r2
r1 1 r0
r2 0 r1
r2 1 r2
"""


@pytest.fixture
def ab_star_text() -> str:
    return AB_STAR


@pytest.fixture
def ab_star():
    """Built automaton for a b*."""
    return build_from_text(AB_STAR).unwrap()


@pytest.fixture
def div3():
    """Built automaton accepting binary multiples of three."""
    return build_from_text(DIV3).unwrap()


@pytest.fixture
def write_file(tmp_path: Path):
    """Write ``content`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
