"""Load errors raised while building an automaton from its description.

Every error is a frozen value carrying the offending token(s). The builder
returns the first one it encounters inside an ``Err``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Section(Enum):
    """Header sections of an automaton description, in reading order."""

    START_STATE = "start state"
    STATE_LIST = "state list"
    SYMBOL_LIST = "symbol list"
    FINISH_LIST = "finish state list"


@dataclass(frozen=True)
class LoadError:
    """Base class for automaton load errors."""

    code: ClassVar[str] = "load_error"

    def to_dict(self) -> dict:
        return {"code": self.code, "message": str(self)}


@dataclass(frozen=True)
class MissingSection(LoadError):
    """Input ended before a required header section was read."""

    section: Section

    code: ClassVar[str] = "missing_section"

    @property
    def kind(self) -> str:
        """Specific error kind, e.g. ``MissingStartState``."""
        return {
            Section.START_STATE: "MissingStartState",
            Section.STATE_LIST: "MissingStateList",
            Section.SYMBOL_LIST: "MissingSymbolList",
            Section.FINISH_LIST: "MissingFinishList",
        }[self.section]

    def to_dict(self) -> dict:
        return {**super().to_dict(), "section": self.section.name.lower()}

    def __str__(self) -> str:
        return f"Cannot read {self.section.value}: input ended"


@dataclass(frozen=True)
class DuplicateState(LoadError):
    """A state name occurs twice in the state list."""

    name: str

    code: ClassVar[str] = "duplicate_state"

    def __str__(self) -> str:
        return f"State {self.name} occurs in state list twice"


@dataclass(frozen=True)
class UnknownStartState(LoadError):
    """The start state is not declared in the state list."""

    name: str

    code: ClassVar[str] = "unknown_start_state"

    def __str__(self) -> str:
        return f"Start state {self.name} is not listed in states list"


@dataclass(frozen=True)
class DuplicateSymbol(LoadError):
    """A symbol occurs twice in the symbol list."""

    symbol: str

    code: ClassVar[str] = "duplicate_symbol"

    def __str__(self) -> str:
        return f"Symbol {self.symbol} occurs in symbol list twice"


@dataclass(frozen=True)
class EmptyAlphabet(LoadError):
    """The symbol list holds no symbols."""

    code: ClassVar[str] = "empty_alphabet"

    def __str__(self) -> str:
        return "Symbol list is empty"


@dataclass(frozen=True)
class MultiCharSymbol(LoadError):
    """A symbol token longer than one character (strict mode only)."""

    token: str

    code: ClassVar[str] = "multi_char_symbol"

    def __str__(self) -> str:
        return f"Symbol token {self.token!r} is longer than one character"


@dataclass(frozen=True)
class UnknownFinishState(LoadError):
    """An accepting-state reference does not resolve to a declared state."""

    name: str

    code: ClassVar[str] = "unknown_finish_state"

    def __str__(self) -> str:
        return f"Finishing state {self.name} is not listed in states list"


@dataclass(frozen=True)
class DuplicateFinishState(LoadError):
    """A state is declared accepting twice."""

    name: str

    code: ClassVar[str] = "duplicate_finish_state"

    def __str__(self) -> str:
        return f"Duplicated finishing state: {self.name}"


@dataclass(frozen=True)
class InvalidTransition(LoadError):
    """A transition record references an undeclared state or symbol."""

    from_state: str
    symbol: str
    to_state: str

    code: ClassVar[str] = "invalid_transition"

    def __str__(self) -> str:
        return f"Invalid transition: {self.from_state} {self.symbol} {self.to_state}"


@dataclass(frozen=True)
class DuplicateTransition(LoadError):
    """A (state, symbol) pair is defined by more than one record."""

    from_state: str
    symbol: str
    to_state: str

    code: ClassVar[str] = "duplicate_transition"

    def __str__(self) -> str:
        return f"Duplicate transition: {self.from_state} {self.symbol} {self.to_state}"
