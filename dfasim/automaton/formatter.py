"""Render an automaton back to text."""

from __future__ import annotations

from dfasim.models.automaton import Automaton
from dfasim.reader.lines import DEFAULT_COMMENT_PREFIX

UNDEFINED_MARK = "??????"


def format_automaton(
    automaton: Automaton,
    header: str | None = None,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> str:
    """
    Serialize an automaton in the description format.

    Building the returned text yields an automaton with the same states,
    symbols, accepting set and transition table.

    Args:
        automaton: Automaton to serialize
        header: Optional comment placed on the first line
        comment_prefix: Prefix the reader treats as a comment marker

    Returns:
        Description text ending with a newline
    """
    lines = [
        automaton.start_state.name,
        " ".join(s.name for s in automaton.states),
        " ".join(automaton.symbols),
        # Whitespace-only when nothing accepts; an empty line would be skipped.
        " ".join(s.name for s in automaton.accepting_states) or " ",
    ]
    for src, symbol, dest in automaton.transitions():
        lines.append(f"{src} {symbol} {dest}")

    # Lines that would read as comments (e.g. a "#" symbol first) get a
    # leading blank, which tokenizing ignores.
    body = [" " + line if line.startswith(comment_prefix) else line for line in lines]
    if header:
        body.insert(0, f"{comment_prefix} {header}")
    return "\n".join(body) + "\n"


def describe_automaton(automaton: Automaton) -> str:
    """Human-readable summary including the full transition table."""
    lines = [
        f"Start state: {automaton.start_state.name}",
        "End states:  " + " ".join(s.name for s in automaton.accepting_states),
        "All states:  " + " ".join(s.name for s in automaton.states),
        "Symbols:     " + " ".join(automaton.symbols),
        "Transition table: -------------",
    ]

    width = max(6, max(len(s.name) for s in automaton.states))
    for state_idx, state in enumerate(automaton.states):
        for symbol in automaton.symbols:
            dest_idx = automaton.next_state(state_idx, symbol)
            dest = automaton.states[dest_idx].name if dest_idx is not None else UNDEFINED_MARK
            lines.append(f"{state.name:>{width}} {symbol} {dest}")

    return "\n".join(line.rstrip() for line in lines)
