"""Data models for dfasim."""

from dfasim.models.automaton import Automaton, Classification, State

__all__ = [
    "Automaton",
    "Classification",
    "State",
]
