"""String classification by simulating an automaton."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from dfasim.models.automaton import Automaton, Classification


@dataclass(frozen=True)
class Trace:
    """
    Classification of one string together with the states it visited.

    Attributes:
        text: The classified string
        classification: The outcome
        path: Names of visited states, starting with the start state. Empty
            for INVALID_SYMBOL; stops at the last reachable state when the
            walk got stuck on an undefined transition.
        consumed: Number of characters consumed before the walk ended
    """

    text: str
    classification: Classification
    path: tuple[str, ...] = field(default_factory=tuple)
    consumed: int = 0

    @property
    def stuck(self) -> bool:
        """True when rejection came from an undefined transition."""
        return (
            self.classification is Classification.REJECTED
            and self.consumed < len(self.text)
        )

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "classification": self.classification.value,
            "path": list(self.path),
            "consumed": self.consumed,
            "stuck": self.stuck,
        }


def has_invalid_symbol(automaton: Automaton, text: str) -> bool:
    """True when any character of ``text`` is outside the alphabet."""
    return any(automaton.symbol_index(c) is None for c in text)


def classify(automaton: Automaton, text: str) -> Classification:
    """
    Classify ``text`` as accepted, rejected, or containing an invalid symbol.

    The whole string is checked against the alphabet before any transition
    is taken, so a single foreign character anywhere yields INVALID_SYMBOL.
    An undefined transition rejects immediately without consuming the rest.
    """
    if has_invalid_symbol(automaton, text):
        return Classification.INVALID_SYMBOL

    current = automaton.start_index
    for c in text:
        nxt = automaton.next_state(current, c)
        if nxt is None:
            return Classification.REJECTED
        current = nxt

    if automaton.states[current].accepting:
        return Classification.ACCEPTED
    return Classification.REJECTED


def trace(automaton: Automaton, text: str) -> Trace:
    """Classify ``text`` and record the states visited on the way."""
    if has_invalid_symbol(automaton, text):
        return Trace(text=text, classification=Classification.INVALID_SYMBOL)

    current = automaton.start_index
    path = [automaton.states[current].name]
    for consumed, c in enumerate(text):
        nxt = automaton.next_state(current, c)
        if nxt is None:
            return Trace(
                text=text,
                classification=Classification.REJECTED,
                path=tuple(path),
                consumed=consumed,
            )
        current = nxt
        path.append(automaton.states[current].name)

    outcome = (
        Classification.ACCEPTED
        if automaton.states[current].accepting
        else Classification.REJECTED
    )
    return Trace(text=text, classification=outcome, path=tuple(path), consumed=len(text))


def classify_many(automaton: Automaton, texts: Iterable[str]) -> list[Classification]:
    return [classify(automaton, text) for text in texts]
