"""
Precedence constraints derived from a sorted word list.

Each adjacent pair of words contributes at most one constraint: the symbols at
the first position where the two words differ, the left one ordered before the
right one. Pairs where one word is a prefix of the other (or equal words)
carry no ordering evidence and are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, Set, Tuple

logger = logging.getLogger(__name__)

Symbol = Hashable
Word = Sequence[Symbol]


@dataclass(frozen=True)
class Constraint:
    """
    A single "comes-before" fact.

    Attributes:
        before: Symbol that comes first in the target order.
        after: Symbol that comes after `before`.
        pair_index: Index i of the adjacent pair (words[i], words[i + 1])
            the constraint was read from.
        position: Position of the first differing symbol within that pair.
    """

    before: Symbol
    after: Symbol
    pair_index: int
    position: int

    @property
    def edge(self) -> Tuple[Symbol, Symbol]:
        return (self.before, self.after)


def validate_words(words: Sequence[Word]) -> List[Word]:
    """
    Check that `words` is a sequence of symbol sequences.

    Returns:
        The words as a list.

    Raises:
        ValueError: If words or any single word is None, or a word is not a
            sequence.
    """
    if words is None:
        raise ValueError("words cannot be None")
    out: List[Word] = []
    for i, word in enumerate(words):
        if word is None:
            raise ValueError(f"word at index {i} cannot be None")
        if not isinstance(word, (str, Sequence)):
            raise ValueError(
                f"word at index {i} must be a sequence of symbols, got {type(word).__name__}"
            )
        out.append(word)
    return out


def first_difference(
    left: Word, right: Word
) -> Optional[Tuple[Symbol, Symbol, int]]:
    """
    Find the first position where two words differ.

    Args:
        left: Word that sorts first.
        right: Word that sorts second.

    Returns:
        (left_symbol, right_symbol, position) for the first mismatch, or None
        if one word is a prefix of the other.
    """
    for pos, (a, b) in enumerate(zip(left, right)):
        if a != b:
            return a, b, pos
    return None


def collect_symbols(words: Sequence[Word]) -> Dict[Symbol, int]:
    """
    Collect the distinct symbols of all words by first appearance.

    Returns:
        Mapping symbol -> rank of first appearance (0-based). Empty words
        contribute nothing.
    """
    symbols: Dict[Symbol, int] = {}
    for word in validate_words(words):
        for sym in word:
            if sym not in symbols:
                symbols[sym] = len(symbols)
    return symbols


def extract_constraints(words: Sequence[Word]) -> List[Constraint]:
    """
    Read one precedence constraint from every informative adjacent pair.

    Only the first differing position of a pair is used; later positions are
    ignored even when they differ.

    Args:
        words: Words sorted under the unknown order.

    Returns:
        Constraints in pair order. The same edge may appear more than once
        when several pairs support it.
    """
    words = validate_words(words)
    constraints: List[Constraint] = []
    for i, (left, right) in enumerate(zip(words, words[1:])):
        diff = first_difference(left, right)
        if diff is None:
            continue
        a, b, pos = diff
        constraints.append(Constraint(before=a, after=b, pair_index=i, position=pos))
    logger.debug(
        "extracted %d constraints from %d adjacent pairs",
        len(constraints),
        max(len(words) - 1, 0),
    )
    return constraints


class ConstraintIndex:
    """
    Mirrored predecessor/successor indexes over recorded edges.

    `precedes[s]` holds the symbols with an edge into `s` and `follows[s]` the
    symbols with an edge out of `s`. Both sides are kept consistent, and a
    symbol whose set becomes empty loses its key entirely, so key membership
    alone answers "has a predecessor".
    """

    def __init__(self) -> None:
        self.precedes: Dict[Symbol, Set[Symbol]] = {}
        self.follows: Dict[Symbol, Set[Symbol]] = {}

    @classmethod
    def from_constraints(cls, constraints: Sequence[Constraint]) -> "ConstraintIndex":
        index = cls()
        for c in constraints:
            index.add(c.before, c.after)
        return index

    def copy(self) -> "ConstraintIndex":
        """Return an independent copy of both indexes."""
        other = ConstraintIndex()
        other.precedes = {k: set(v) for k, v in self.precedes.items()}
        other.follows = {k: set(v) for k, v in self.follows.items()}
        return other

    def add(self, before: Symbol, after: Symbol) -> None:
        """Record the edge before -> after on both sides."""
        if before == after:
            raise ValueError(f"A symbol cannot precede itself: {before!r}")
        self.follows.setdefault(before, set()).add(after)
        self.precedes.setdefault(after, set()).add(before)

    def has_predecessor(self, symbol: Symbol) -> bool:
        return symbol in self.precedes

    def predecessors(self, symbol: Symbol) -> Set[Symbol]:
        return set(self.precedes.get(symbol, ()))

    def release(self, symbol: Symbol) -> List[Symbol]:
        """
        Remove `symbol` from the graph after it has been emitted.

        Every successor drops `symbol` from its predecessor set; emptied
        entries are deleted.

        Returns:
            Successors left with no predecessor by this removal.
        """
        freed: List[Symbol] = []
        for succ in self.follows.pop(symbol, set()):
            prior = self.precedes.get(succ)
            if prior is None:
                continue
            prior.discard(symbol)
            if not prior:
                del self.precedes[succ]
                freed.append(succ)

        # Any predecessor links the symbol still holds are dropped as well.
        for pred in self.precedes.pop(symbol, set()):
            later = self.follows.get(pred)
            if later is None:
                continue
            later.discard(symbol)
            if not later:
                del self.follows[pred]
        return freed

    def edges(self) -> Iterator[Tuple[Symbol, Symbol]]:
        for before, afters in self.follows.items():
            for after in afters:
                yield before, after

    def __len__(self) -> int:
        return sum(len(v) for v in self.follows.values())
