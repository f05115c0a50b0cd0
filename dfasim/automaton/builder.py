"""Build a validated automaton from its textual description.

The description is read as an ordered sequence of significant lines:

    <start-state>
    <state> <state> ...
    <symbol> <symbol> ...
    <accepting-state> ...        (may hold no tokens)
    <from> <symbol> <to>         (zero or more transition records)

Construction fails fast: the first violated invariant is returned as an
``Err`` and no automaton is produced.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

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
from dfasim.models.automaton import Automaton, State
from dfasim.reader.lines import DEFAULT_COMMENT_PREFIX, split_lines
from dfasim.utils.logging import get_logger
from dfasim.utils.result import Err, Ok, Result

logger = get_logger("automaton.builder")


class _Failure(Exception):
    """Internal short-circuit carrying the first load error."""

    def __init__(self, error: LoadError) -> None:
        self.error = error
        super().__init__(str(error))


class AutomatonBuilder:
    """
    Parses an automaton description into an ``Automaton``.

    A builder instance holds no state between calls and may be reused.

    Args:
        strict_symbols: Reject multi-character symbol tokens instead of
            silently using their first character
    """

    def __init__(self, strict_symbols: bool = False) -> None:
        self.strict_symbols = strict_symbols

    def build(self, lines: Iterable[str]) -> Result[Automaton, LoadError]:
        """
        Build an automaton from significant description lines.

        Args:
            lines: Description lines with comments and blank lines removed

        Returns:
            Ok with the automaton, or Err with the first load error
        """
        try:
            automaton = self._build(iter(lines))
        except _Failure as failure:
            logger.debug(
                "automaton_rejected",
                code=failure.error.code,
                error=str(failure.error),
            )
            return Err(failure.error)

        logger.debug(
            "automaton_built",
            states=len(automaton.states),
            symbols=len(automaton.symbols),
            transitions=len(automaton.table),
        )
        return Ok(automaton)

    def _build(self, lines: Iterator[str]) -> Automaton:
        start_name = self._next_section(lines, Section.START_STATE).strip()

        state_names = self._parse_states(self._next_section(lines, Section.STATE_LIST))
        state_lookup = {name: idx for idx, name in enumerate(state_names)}

        start_index = state_lookup.get(start_name)
        if start_index is None:
            raise _Failure(UnknownStartState(start_name))

        symbols = self._parse_symbols(self._next_section(lines, Section.SYMBOL_LIST))
        if not symbols:
            raise _Failure(EmptyAlphabet())
        symbol_lookup = {symbol: idx for idx, symbol in enumerate(symbols)}

        accepting = self._parse_accepting(
            self._next_section(lines, Section.FINISH_LIST),
            state_lookup,
        )

        table: dict[tuple[int, int], int] = {}
        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            self._add_transition(tokens, state_lookup, symbol_lookup, table)

        states = tuple(
            State(name=name, accepting=idx in accepting)
            for idx, name in enumerate(state_names)
        )
        return Automaton(
            states=states,
            start_index=start_index,
            symbols=tuple(symbols),
            table=table,
        )

    @staticmethod
    def _next_section(lines: Iterator[str], section: Section) -> str:
        line = next(lines, None)
        if line is None:
            raise _Failure(MissingSection(section))
        return line

    @staticmethod
    def _parse_states(line: str) -> list[str]:
        names: list[str] = []
        seen: set[str] = set()
        for name in line.split():
            if name in seen:
                raise _Failure(DuplicateState(name))
            seen.add(name)
            names.append(name)
        return names

    def _symbol_of(self, token: str) -> str:
        # A multi-character token stands for its first character unless strict.
        if self.strict_symbols and len(token) > 1:
            raise _Failure(MultiCharSymbol(token))
        return token[0]

    def _parse_symbols(self, line: str) -> list[str]:
        symbols: list[str] = []
        for token in line.split():
            symbol = self._symbol_of(token)
            if symbol in symbols:
                raise _Failure(DuplicateSymbol(symbol))
            symbols.append(symbol)
        return symbols

    @staticmethod
    def _parse_accepting(line: str, state_lookup: dict[str, int]) -> set[int]:
        accepting: set[int] = set()
        for name in line.split():
            idx = state_lookup.get(name)
            if idx is None:
                raise _Failure(UnknownFinishState(name))
            if idx in accepting:
                raise _Failure(DuplicateFinishState(name))
            accepting.add(idx)
        return accepting

    def _add_transition(
        self,
        tokens: list[str],
        state_lookup: dict[str, int],
        symbol_lookup: dict[str, int],
        table: dict[tuple[int, int], int],
    ) -> None:
        # Tokens past the third are ignored; missing ones are reported empty.
        from_name, symbol_token, to_name = (tokens + ["", ""])[:3]

        from_idx = state_lookup.get(from_name)
        to_idx = state_lookup.get(to_name)
        symbol_idx: Optional[int] = None
        if symbol_token:
            symbol_idx = symbol_lookup.get(self._symbol_of(symbol_token))

        if from_idx is None or symbol_idx is None or to_idx is None:
            raise _Failure(InvalidTransition(from_name, symbol_token, to_name))

        if (from_idx, symbol_idx) in table:
            raise _Failure(DuplicateTransition(from_name, symbol_token, to_name))

        table[(from_idx, symbol_idx)] = to_idx


def build(
    lines: Iterable[str],
    strict_symbols: bool = False,
) -> Result[Automaton, LoadError]:
    """Build an automaton from significant description lines."""
    return AutomatonBuilder(strict_symbols=strict_symbols).build(lines)


def build_from_text(
    text: str,
    strict_symbols: bool = False,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> Result[Automaton, LoadError]:
    """Build an automaton from a raw description, skipping comments and blanks."""
    return build(split_lines(text, comment_prefix), strict_symbols=strict_symbols)
