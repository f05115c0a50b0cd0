"""Tests for building automata from their textual description."""

import dataclasses

import pytest

from dfasim.automaton.builder import AutomatonBuilder, build, build_from_text
from dfasim.automaton.errors import (
    DuplicateFinishState,
    DuplicateState,
    DuplicateSymbol,
    DuplicateTransition,
    EmptyAlphabet,
    InvalidTransition,
    MissingSection,
    MultiCharSymbol,
    Section,
    UnknownFinishState,
    UnknownStartState,
)
from dfasim.models.automaton import Automaton, State


def load_error(text: str, **kwargs):
    result = build_from_text(text, **kwargs)
    assert result.is_err(), f"expected a load error, got {result}"
    return result.unwrap_err()


class TestSuccessfulBuild:
    """Descriptions that load."""

    def test_ab_star_structure(self, ab_star):
        assert [s.name for s in ab_star.states] == ["q0", "q1"]
        assert ab_star.start_state == State("q0", accepting=False)
        assert ab_star.symbols == ("a", "b")
        assert ab_star.accepting_states == (State("q1", accepting=True),)
        assert list(ab_star.transitions()) == [("q0", "a", "q1"), ("q1", "b", "q1")]

    def test_partial_table_is_valid(self, ab_star):
        assert not ab_star.is_complete
        assert ab_star.next_state(0, "b") is None

    def test_complete_table(self, div3):
        assert div3.is_complete
        assert len(div3.table) == 6

    def test_build_accepts_prefiltered_lines(self):
        result = build(["q0", "q0 q1", "a", "q1", "q0 a q1"])

        assert result.is_ok()
        assert result.unwrap().next_state(0, "a") == 1

    def test_comments_and_blank_lines_are_skipped_everywhere(self):
        text = "\n# c\nq0\n\n# c\nq0 q1\n#\na\n\nq1\n\n# c\nq0 a q1\n\n"

        result = build_from_text(text)

        assert result.is_ok()
        assert len(result.unwrap().table) == 1

    def test_whitespace_only_finish_line_means_no_accepting_states(self):
        automaton = build_from_text("q0\nq0 q1\na b\n   \nq0 a q1\n").unwrap()

        assert automaton.accepting_states == ()

    def test_empty_finish_line_is_skipped_like_any_blank_line(self):
        # The first transition record is then read as the finish list.
        error = load_error("q0\nq0 q1\na b\n\nq0 a q1\n")

        assert error == UnknownFinishState("a")

    def test_no_transitions(self):
        automaton = build_from_text("q0\nq0\na\nq0\n").unwrap()

        assert dict(automaton.table) == {}

    def test_transitions_in_any_order(self, div3):
        reordered = build_from_text(
            "r0\nr0 r1 r2\n0 1\nr0\n"
            "r2 1 r2\nr1 0 r2\nr0 1 r1\nr2 0 r1\nr1 1 r0\nr0 0 r0\n"
        ).unwrap()

        assert reordered == div3

    def test_extra_tokens_on_transition_line_are_ignored(self):
        automaton = build_from_text("q0\nq0 q1\na\nq1\nq0 a q1 trailing words\n").unwrap()

        assert automaton.next_state(0, "a") == 1

    def test_whitespace_only_transition_line_is_ignored(self):
        automaton = build_from_text("q0\nq0 q1\na\nq1\n  \nq0 a q1\n").unwrap()

        assert len(automaton.table) == 1

    def test_start_line_surrounding_blanks(self):
        automaton = build_from_text("  q1 \nq0 q1\na\nq1\n").unwrap()

        assert automaton.start_state.name == "q1"

    def test_builder_is_reusable(self, ab_star):
        builder = AutomatonBuilder()
        lines = ["q0", "q0 q1", "a b", "q1", "q0 a q1", "q1 b q1"]

        first = builder.build(lines).unwrap()
        second = builder.build(lines).unwrap()

        assert first == second == ab_star


class TestMissingSections:
    """Input ending before each header section."""

    @pytest.mark.parametrize(
        "text,section,kind",
        [
            ("", Section.START_STATE, "MissingStartState"),
            ("# only a comment\n", Section.START_STATE, "MissingStartState"),
            ("q0\n", Section.STATE_LIST, "MissingStateList"),
            ("q0\nq0 q1\n", Section.SYMBOL_LIST, "MissingSymbolList"),
            ("q0\nq0 q1\na b\n", Section.FINISH_LIST, "MissingFinishList"),
        ],
    )
    def test_missing_section(self, text, section, kind):
        error = load_error(text)

        assert isinstance(error, MissingSection)
        assert error.section is section
        assert error.kind == kind


class TestStatesAndStart:
    def test_unknown_start_state(self):
        error = load_error("q5\nq0 q1\na\nq1\n")

        assert error == UnknownStartState("q5")
        assert "q5" in str(error)

    def test_start_line_with_two_names_is_not_a_state(self):
        error = load_error("q0 q1\nq0 q1\na\nq1\n")

        assert error == UnknownStartState("q0 q1")

    def test_empty_state_list_cannot_hold_start_state(self):
        assert load_error("q0\n \na\n \n") == UnknownStartState("q0")

    def test_duplicate_state(self):
        assert load_error("q0\nq0 q1 q0\na\nq1\n") == DuplicateState("q0")


class TestSymbols:
    def test_duplicate_symbol(self):
        error = load_error("q0\nq0\na b a\nq0\n")

        assert error == DuplicateSymbol("a")
        assert "a" in str(error)

    def test_multi_char_token_uses_first_character(self):
        automaton = build_from_text("q0\nq0\nab c\nq0\n").unwrap()

        assert automaton.symbols == ("a", "c")

    def test_multi_char_token_can_collide(self):
        assert load_error("q0\nq0\nab a\nq0\n") == DuplicateSymbol("a")

    def test_strict_mode_rejects_multi_char_token(self):
        assert load_error("q0\nq0\nab c\nq0\n", strict_symbols=True) == MultiCharSymbol("ab")

    def test_strict_mode_accepts_single_characters(self):
        assert build_from_text("q0\nq0\na c\nq0\n", strict_symbols=True).is_ok()

    def test_empty_alphabet(self):
        assert load_error("q0\nq0\n  \nq0\n") == EmptyAlphabet()

    def test_symbol_line_starting_with_comment_prefix_is_a_comment(self):
        # "# a" is skipped, so the finish list is read as the symbol list.
        error = load_error("q0\nq0\n# a\nq0\n")

        assert error == MissingSection(Section.FINISH_LIST)

    def test_comment_prefix_symbol_with_leading_blank(self):
        automaton = build_from_text("q0\nq0\n # a\nq0\nq0 # q0\n").unwrap()

        assert automaton.symbols == ("#", "a")
        assert automaton.next_state(0, "#") == 0


class TestFinishStates:
    def test_unknown_finish_state(self):
        error = load_error("q0\nq0 q1\na b\nq9\n")

        assert error == UnknownFinishState("q9")
        assert "q9" in str(error)

    def test_duplicate_finish_state(self):
        assert load_error("q0\nq0 q1\na\nq1 q0 q1\n") == DuplicateFinishState("q1")

    def test_start_state_may_accept(self):
        automaton = build_from_text("q0\nq0 q1\na\nq0\n").unwrap()

        assert automaton.start_state.accepting


class TestTransitions:
    @pytest.mark.parametrize(
        "record,expected",
        [
            ("q7 a q1", InvalidTransition("q7", "a", "q1")),
            ("q0 c q1", InvalidTransition("q0", "c", "q1")),
            ("q0 a q9", InvalidTransition("q0", "a", "q9")),
            ("q0 a", InvalidTransition("q0", "a", "")),
            ("q0", InvalidTransition("q0", "", "")),
        ],
    )
    def test_invalid_transition(self, record, expected):
        assert load_error(f"q0\nq0 q1\na b\nq1\n{record}\n") == expected

    def test_duplicate_transition(self):
        error = load_error("q0\nq0 q1\na b\nq1\nq0 a q1\nq1 b q1\nq0 a q0\n")

        assert error == DuplicateTransition("q0", "a", "q0")
        assert str(error) == "Duplicate transition: q0 a q0"

    def test_identical_duplicate_is_still_an_error(self):
        error = load_error("q0\nq0 q1\na\nq1\nq0 a q1\nq0 a q1\n")

        assert isinstance(error, DuplicateTransition)

    def test_multi_char_transition_symbol_uses_first_character(self):
        automaton = build_from_text("q0\nq0 q1\na\nq1\nq0 ax q1\n").unwrap()

        assert automaton.next_state(0, "a") == 1

    def test_strict_mode_rejects_multi_char_transition_symbol(self):
        error = load_error("q0\nq0 q1\na\nq1\nq0 ax q1\n", strict_symbols=True)

        assert error == MultiCharSymbol("ax")


class TestFailFast:
    def test_first_error_wins(self):
        error = load_error("q0\nq0 q1\na a\nq9\nq0 z q5\n")

        assert error == DuplicateSymbol("a")

    def test_error_to_dict(self):
        error = load_error("q0\nq0 q1\na\nq1\nq0 a q1\nq0 a q0\n")

        assert error.to_dict() == {
            "code": "duplicate_transition",
            "message": "Duplicate transition: q0 a q0",
        }

    def test_missing_section_to_dict(self):
        assert load_error("q0\n").to_dict()["section"] == "state_list"

    def test_errors_are_immutable(self):
        error = load_error("q0\nq0 q1\na\nq9\n")

        with pytest.raises(dataclasses.FrozenInstanceError):
            error.name = "q1"


class TestAutomatonModel:
    def test_automaton_is_immutable(self, ab_star):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ab_star.start_index = 1

        with pytest.raises(TypeError):
            ab_star.table[(0, 1)] = 0

    def test_lookups(self, ab_star):
        assert ab_star.state_index("q1") == 1
        assert ab_star.state_index("nope") is None
        assert ab_star.symbol_index("b") == 1
        assert ab_star.symbol_index("z") is None
        assert ab_star.alphabet == frozenset({"a", "b"})

    def test_direct_construction_checks_ranges(self):
        with pytest.raises(ValueError):
            Automaton(states=(State("q0"),), start_index=1, symbols=("a",), table={})

        with pytest.raises(ValueError):
            Automaton(states=(State("q0"),), start_index=0, symbols=("a",), table={(0, 0): 3})

    def test_caller_table_is_copied(self):
        table = {(0, 0): 0}
        automaton = Automaton(states=(State("q0"),), start_index=0, symbols=("a",), table=table)

        table[(0, 0)] = 5

        assert automaton.next_state(0, "a") == 0

    def test_to_dict(self, ab_star):
        assert ab_star.to_dict() == {
            "start_state": "q0",
            "states": ["q0", "q1"],
            "symbols": ["a", "b"],
            "accepting_states": ["q1"],
            "transitions": [
                {"from": "q0", "symbol": "a", "to": "q1"},
                {"from": "q1", "symbol": "b", "to": "q1"},
            ],
            "complete": False,
        }
