"""
dfasim - load deterministic finite automata and classify strings with them.

Example usage:
    >>> from dfasim import build_from_text, classify
    >>> automaton = build_from_text("q0\\nq0 q1\\na b\\nq1\\nq0 a q1\\nq1 b q1\\n").unwrap()
    >>> classify(automaton, "ab")
    <Classification.ACCEPTED: 'accepted'>
"""

from dfasim.automaton import (
    AutomatonBuilder,
    LoadError,
    Trace,
    build,
    build_from_text,
    classify,
    format_automaton,
    trace,
)
from dfasim.models import Automaton, Classification, State

__version__ = "0.1.0"

__all__ = [
    # Main API
    "build",
    "build_from_text",
    "classify",
    "trace",
    "format_automaton",
    "AutomatonBuilder",
    # Models
    "Automaton",
    "Classification",
    "State",
    "Trace",
    # Errors
    "LoadError",
    # Version
    "__version__",
]
