"""
Unit tests for core alphabet inference.

Tests get_alphabet, Alphabet and AlphabetDrain for correct orders, tie
handling, and failure on contradictory input.
"""

import pytest

from alphabet.constraints import ConstraintIndex, extract_constraints
from alphabet.core import (
    TIE_BREAK_MODES,
    Alphabet,
    AlphabetDrain,
    AlphabetOrderError,
    AmbiguousOrderError,
    CyclicConstraintError,
    get_alphabet,
)


def _respects_constraints(words: list, order: list) -> bool:
    position = {s: i for i, s in enumerate(order)}
    return all(position[c.before] < position[c.after] for c in extract_constraints(words))


class TestGetAlphabet:
    """Test suite for get_alphabet."""

    def test_no_words(self) -> None:
        """Empty input yields an empty order."""
        assert get_alphabet([]) == []

    def test_single_letter_words(self) -> None:
        """Single-symbol words form a chain."""
        assert get_alphabet(["d", "c", "b", "a"]) == ["d", "c", "b", "a"]

    def test_empty_word(self) -> None:
        """A list of empty words has no alphabet."""
        assert get_alphabet([""]) == []
        assert get_alphabet(["", "", ""]) == []

    def test_ties_in_first_character(self) -> None:
        """Only the first differing position constrains the order."""
        assert get_alphabet(["bac", "aaa", "acb"]) == ["b", "a", "c"]

    def test_more_complex(self) -> None:
        """A longer list with prefixes and redundant evidence."""
        words = ["zzzzzz", "zzzzq", "t", "qqzq", "qqz5", "55", "5b", "rr", "rbb", "rbf"]
        assert get_alphabet(words) == ["z", "t", "q", "5", "r", "b", "f"]

    def test_unicode(self) -> None:
        """Multi-byte characters are treated as whole symbols."""
        assert get_alphabet(["źęń", "ęęę", "ęńź"]) == ["ź", "ę", "ń"]

    def test_single_word(self) -> None:
        """One word gives its symbols in first-seen order."""
        assert get_alphabet(["cab"]) == ["c", "a", "b"]

    def test_every_symbol_exactly_once(self) -> None:
        """The result is a permutation of the distinct input symbols."""
        words = ["wrt", "wrf", "er", "ett", "rftt"]
        order = get_alphabet(words)
        assert sorted(order) == sorted(set("".join(words)))
        assert len(order) == len(set(order))
        assert _respects_constraints(words, order)

    def test_transitive_order(self) -> None:
        """Edges from consecutive pairs chain transitively."""
        order = get_alphabet(["x", "y", "z"])
        assert order.index("x") < order.index("y") < order.index("z")

    def test_duplicate_evidence_does_not_change_result(self) -> None:
        """Repeating a pair that gives an existing edge changes nothing."""
        base = ["bac", "aaa", "acb"]
        repeated = ["bac", "bcc", "aaa", "acb"]
        assert get_alphabet(base) == ["b", "a", "c"]
        assert get_alphabet(repeated) == get_alphabet(base)

    def test_prefix_pairs_add_no_edge(self) -> None:
        """Prefix pairs only contribute their symbols."""
        assert get_alphabet(["ab", "abc", "b"]) == ["a", "b", "c"]

    def test_symbol_sequences(self) -> None:
        """Words may be sequences of arbitrary hashable symbols."""
        words = [(3, 1), (3, 2), (1,)]
        assert get_alphabet(words) == [3, 1, 2]

    def test_cycle_raises(self) -> None:
        """Contradictory pairs raise CyclicConstraintError."""
        with pytest.raises(CyclicConstraintError) as info:
            get_alphabet(["a", "b", "a"])
        assert set(info.value.cycle) == {"a", "b"}
        assert set(info.value.remaining) == {"a", "b"}

    def test_cycle_after_partial_order(self) -> None:
        """A cycle deeper in the order still fails without a partial result."""
        with pytest.raises(CyclicConstraintError) as info:
            get_alphabet(["a", "b", "c", "b"])
        assert info.value.remaining == ["b", "c"]
        assert set(info.value.cycle) == {"b", "c"}

    def test_cycle_error_is_value_error(self) -> None:
        """Order errors can be caught as ValueError."""
        with pytest.raises(ValueError, match="Conflicting order"):
            get_alphabet(["a", "b", "a"])
        assert issubclass(AmbiguousOrderError, AlphabetOrderError)

    def test_invalid_tie_break(self) -> None:
        """Unknown tie-break modes raise ValueError."""
        with pytest.raises(ValueError, match="Unknown tie_break"):
            get_alphabet(["ab"], tie_break="alphabetical")

    def test_tie_break_normalized(self) -> None:
        """Tie-break names are case and whitespace insensitive."""
        assert get_alphabet(["ab"], tie_break=" First_Seen ") == ["a", "b"]


class TestTieBreak:
    """Test suite for tie-break policies."""

    def test_first_seen(self) -> None:
        """Ties go to the symbol that appeared first."""
        # Only a < b and c < d are known.
        assert get_alphabet(["ac", "ad", "b"], tie_break="first_seen") == ["a", "c", "d", "b"]

    def test_strict_raises_on_tie(self) -> None:
        """Strict mode refuses to guess."""
        with pytest.raises(AmbiguousOrderError) as info:
            get_alphabet(["ab", "ac", "db"], tie_break="strict")
        assert info.value.candidates == ["a", "b"]
        assert info.value.emitted == []

    def test_strict_accepts_unique_order(self) -> None:
        """Strict mode succeeds when the order is fully determined."""
        assert get_alphabet(["bac", "aaa", "acb"], tie_break="strict") == ["b", "a", "c"]

    def test_strict_reports_emitted_prefix(self) -> None:
        """The strict error lists the symbols emitted before the tie."""
        with pytest.raises(AmbiguousOrderError) as info:
            get_alphabet(["a", "b", "ba", "bc"], tie_break="strict")
        assert info.value.emitted == ["a"]
        assert info.value.candidates == ["b", "c"]

    def test_random_is_seeded(self) -> None:
        """Random tie-breaking is reproducible with a seed."""
        words = ["ab", "cd", "ef"]
        first = get_alphabet(words, tie_break="random", seed=7)
        second = get_alphabet(words, tie_break="random", seed=7)
        assert first == second
        assert sorted(first) == ["a", "b", "c", "d", "e", "f"]
        assert _respects_constraints(words, first)

    def test_modes_constant(self) -> None:
        """All documented modes are listed."""
        assert set(TIE_BREAK_MODES) == {"first_seen", "strict", "random"}


class TestAlphabet:
    """Test suite for Alphabet and AlphabetDrain."""

    def test_from_words_none_without_symbols(self) -> None:
        """No symbols is signalled with None rather than an empty alphabet."""
        assert Alphabet.from_words([]) is None
        assert Alphabet.from_words(["", ""]) is None

    def test_from_words(self) -> None:
        """Build an alphabet and report its size."""
        alphabet = Alphabet.from_words(["bac", "aaa", "acb"])
        assert alphabet is not None
        assert len(alphabet) == 3
        assert alphabet.tie_break == "first_seen"

    def test_drain_is_lazy(self) -> None:
        """The drain pops one symbol per step."""
        alphabet = Alphabet.from_words(["d", "c", "b", "a"])
        assert alphabet is not None
        drain = alphabet.drain()
        assert isinstance(drain, AlphabetDrain)
        assert drain.__length_hint__() == 4

        assert next(drain) == "d"
        assert len(alphabet) == 3
        assert drain.__length_hint__() == 3
        assert list(drain) == ["c", "b", "a"]
        assert len(alphabet) == 0

    def test_drain_exhausted(self) -> None:
        """An exhausted drain keeps raising StopIteration."""
        alphabet = Alphabet.from_words(["ab"])
        assert alphabet is not None
        drain = alphabet.drain()
        assert list(drain) == ["a", "b"]
        with pytest.raises(StopIteration):
            next(drain)

    def test_drain_once(self) -> None:
        """An alphabet can only be drained once."""
        alphabet = Alphabet.from_words(["ab"])
        assert alphabet is not None
        alphabet.drain()
        with pytest.raises(RuntimeError, match="already been drained"):
            alphabet.drain()

    def test_drain_stops_after_failure(self) -> None:
        """After a conflict the drain yields nothing more."""
        alphabet = Alphabet.from_words(["a", "b", "a"])
        assert alphabet is not None
        drain = alphabet.drain()
        with pytest.raises(CyclicConstraintError):
            next(drain)
        assert list(drain) == []

    def test_empty_symbols_rejected(self) -> None:
        """The constructor requires at least one symbol."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Alphabet({}, ConstraintIndex())

    def test_unknown_index_symbols_rejected(self) -> None:
        """The index may only reference known symbols."""
        index = ConstraintIndex()
        index.add("a", "z")
        with pytest.raises(ValueError, match="unknown symbols"):
            Alphabet({"a": 0}, index)

    def test_caller_index_left_intact(self) -> None:
        """Draining works on a private copy of the given index."""
        index = ConstraintIndex()
        index.add("a", "b")
        alphabet = Alphabet({"a": 0, "b": 1}, index)

        assert list(alphabet.drain()) == ["a", "b"]
        assert index.precedes == {"b": {"a"}}
        assert index.follows == {"a": {"b"}}

    def test_released_successors_become_candidates(self) -> None:
        """Symbols freed by a step are the candidates of the next one."""
        index = ConstraintIndex()
        index.add("a", "b")
        index.add("a", "c")
        index.add("b", "d")
        index.add("c", "d")
        alphabet = Alphabet({"a": 0, "b": 1, "c": 2, "d": 3}, index)
        assert alphabet._candidates() == ["a"]

        drain = alphabet.drain()
        assert next(drain) == "a"
        assert alphabet._candidates() == ["b", "c"]
        assert next(drain) == "b"
        assert alphabet._candidates() == ["c"]
        assert list(drain) == ["c", "d"]
