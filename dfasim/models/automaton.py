"""Data model for deterministic finite automata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


class Classification(Enum):
    """Outcome of running an input string through an automaton."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    INVALID_SYMBOL = "invalid_symbol"

    def is_accepted(self) -> bool:
        return self is Classification.ACCEPTED


@dataclass(frozen=True)
class State:
    """
    A named automaton state.

    Attributes:
        name: Human-readable name, unique within an automaton
        accepting: Whether ending input here accepts the string
    """

    name: str
    accepting: bool = False


@dataclass(frozen=True)
class Automaton:
    """
    Immutable deterministic finite automaton.

    States and symbols are kept in declaration order. The transition table is
    keyed by (state index, symbol index) and maps to the destination state
    index; pairs that are absent have no transition.

    Instances are normally produced by ``dfasim.automaton.builder.build``,
    which enforces every invariant before construction. Direct construction
    only checks that indices are in range.
    """

    states: tuple[State, ...]
    start_index: int
    symbols: tuple[str, ...]
    table: Mapping[tuple[int, int], int]

    _state_lookup: Mapping[str, int] = field(init=False, repr=False, compare=False)
    _symbol_lookup: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.start_index < len(self.states):
            raise ValueError(f"start_index out of range: {self.start_index}")
        for (state_idx, symbol_idx), dest_idx in self.table.items():
            if not (
                0 <= state_idx < len(self.states)
                and 0 <= symbol_idx < len(self.symbols)
                and 0 <= dest_idx < len(self.states)
            ):
                raise ValueError(
                    f"transition out of range: ({state_idx}, {symbol_idx}) -> {dest_idx}"
                )

        # Frozen dataclass: derived fields are assigned through object.__setattr__
        object.__setattr__(self, "states", tuple(self.states))
        object.__setattr__(self, "symbols", tuple(self.symbols))
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))
        object.__setattr__(
            self,
            "_state_lookup",
            MappingProxyType({s.name: i for i, s in enumerate(self.states)}),
        )
        object.__setattr__(
            self,
            "_symbol_lookup",
            MappingProxyType({c: i for i, c in enumerate(self.symbols)}),
        )

    @property
    def start_state(self) -> State:
        return self.states[self.start_index]

    @property
    def accepting_states(self) -> tuple[State, ...]:
        """Accepting states in declaration order."""
        return tuple(s for s in self.states if s.accepting)

    @property
    def alphabet(self) -> frozenset[str]:
        return frozenset(self.symbols)

    def state_index(self, name: str) -> Optional[int]:
        """Index of the state called ``name``, or None if undeclared."""
        return self._state_lookup.get(name)

    def symbol_index(self, symbol: str) -> Optional[int]:
        """Index of ``symbol`` in the alphabet, or None if not a member."""
        return self._symbol_lookup.get(symbol)

    def next_state(self, state_idx: int, symbol: str) -> Optional[int]:
        """
        Destination of the transition from ``state_idx`` on ``symbol``.

        Returns None when the symbol is outside the alphabet or the pair has
        no transition defined.
        """
        symbol_idx = self._symbol_lookup.get(symbol)
        if symbol_idx is None:
            return None
        return self.table.get((state_idx, symbol_idx))

    def transitions(self) -> Iterator[tuple[str, str, str]]:
        """Yield defined transitions as (from, symbol, to) names, row-major."""
        for state_idx, state in enumerate(self.states):
            for symbol_idx, symbol in enumerate(self.symbols):
                dest_idx = self.table.get((state_idx, symbol_idx))
                if dest_idx is not None:
                    yield state.name, symbol, self.states[dest_idx].name

    @property
    def is_complete(self) -> bool:
        """True when every (state, symbol) pair has a transition."""
        return len(self.table) == len(self.states) * len(self.symbols)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "start_state": self.start_state.name,
            "states": [s.name for s in self.states],
            "symbols": list(self.symbols),
            "accepting_states": [s.name for s in self.accepting_states],
            "transitions": [
                {"from": src, "symbol": symbol, "to": dest}
                for src, symbol, dest in self.transitions()
            ],
            "complete": self.is_complete,
        }
