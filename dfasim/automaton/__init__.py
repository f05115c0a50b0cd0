"""Automaton construction and simulation.

Descriptions are parsed by the builder into an immutable ``Automaton`` which
the simulator then uses to classify strings:

    text -> build() -> Automaton -> classify() -> ACCEPTED | REJECTED | INVALID_SYMBOL
"""

from dfasim.automaton.builder import AutomatonBuilder, build, build_from_text
from dfasim.automaton.errors import (
    DuplicateFinishState,
    DuplicateState,
    DuplicateSymbol,
    DuplicateTransition,
    EmptyAlphabet,
    InvalidTransition,
    LoadError,
    MissingSection,
    MultiCharSymbol,
    Section,
    UnknownFinishState,
    UnknownStartState,
)
from dfasim.automaton.formatter import describe_automaton, format_automaton
from dfasim.automaton.simulator import Trace, classify, classify_many, trace

__all__ = [
    # Builder
    "AutomatonBuilder",
    "build",
    "build_from_text",
    # Errors
    "LoadError",
    "Section",
    "MissingSection",
    "DuplicateState",
    "UnknownStartState",
    "DuplicateSymbol",
    "EmptyAlphabet",
    "MultiCharSymbol",
    "UnknownFinishState",
    "DuplicateFinishState",
    "InvalidTransition",
    "DuplicateTransition",
    # Simulator
    "Trace",
    "classify",
    "classify_many",
    "trace",
    # Formatting
    "format_automaton",
    "describe_automaton",
]
