"""
Core alphabet inference.

Provides the Alphabet container, which owns the symbol set and the two
constraint indexes built from a sorted word list, and AlphabetDrain, the lazy
topological drain that pops the smallest remaining symbol on every step.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from alphabet.constraints import (
    ConstraintIndex,
    Symbol,
    Word,
    collect_symbols,
    extract_constraints,
    validate_words,
)

logger = logging.getLogger(__name__)

TIE_BREAK_MODES = ("first_seen", "strict", "random")


class AlphabetOrderError(ValueError):
    """Base class for word lists that do not determine a valid order."""


class CyclicConstraintError(AlphabetOrderError):
    """
    Raised when every remaining symbol still has a predecessor.

    Attributes:
        remaining: Symbols not yet emitted, in first-seen order.
        cycle: One cycle among the remaining symbols, listed in precedence
            order (each symbol comes before the next, the last before the
            first).
    """

    def __init__(self, remaining: Sequence[Symbol], cycle: Sequence[Symbol]) -> None:
        self.remaining = list(remaining)
        self.cycle = list(cycle)
        chain = " < ".join(repr(s) for s in [*self.cycle, *self.cycle[:1]])
        super().__init__(
            f"Conflicting order: {len(self.remaining)} symbols left and each has "
            f"a predecessor (cycle: {chain})"
        )


class AmbiguousOrderError(AlphabetOrderError):
    """
    Raised in strict mode when several symbols are unconstrained at once.

    Attributes:
        candidates: Tied symbols, in first-seen order.
        emitted: Symbols already emitted before the tie was found.
    """

    def __init__(self, candidates: Sequence[Symbol], emitted: Sequence[Symbol]) -> None:
        self.candidates = list(candidates)
        self.emitted = list(emitted)
        super().__init__(
            f"Ambiguous order after {len(self.emitted)} symbols: "
            f"{', '.join(repr(s) for s in self.candidates)} are all unconstrained"
        )


def _normalize_tie_break(tie_break: str) -> str:
    mode = str(tie_break).strip().lower()
    if mode not in TIE_BREAK_MODES:
        raise ValueError(
            f"Unknown tie_break {tie_break!r}; expected one of {TIE_BREAK_MODES}"
        )
    return mode


class Alphabet:
    """
    Symbol set plus precedence constraints for one sorted word list.

    Instances are built with `from_words` and consumed with `drain`. The set
    and indexes are private; draining destroys them.
    """

    def __init__(
        self,
        symbols: Dict[Symbol, int],
        index: ConstraintIndex,
        *,
        tie_break: str = "first_seen",
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize from an already collected symbol set and index.

        Args:
            symbols: Non-empty mapping symbol -> first-seen rank. Must contain
                every symbol referenced by `index`.
            index: Constraint index over `symbols`.
            tie_break: "first_seen", "strict" or "random".
            seed: Seed for tie_break="random".

        Raises:
            ValueError: If symbols is empty, the index references unknown
                symbols, or tie_break is unknown.
        """
        if not symbols:
            raise ValueError("symbols cannot be empty")
        unknown = [
            s for s in (*index.precedes.keys(), *index.follows.keys()) if s not in symbols
        ]
        if unknown:
            raise ValueError(f"Constraint index references unknown symbols: {unknown!r}")
        self._symbols: Dict[Symbol, int] = dict(symbols)
        self._index = index.copy()
        self._ready = {s for s in self._symbols if not self._index.has_predecessor(s)}
        self._tie_break = _normalize_tie_break(tie_break)
        self._rng = np.random.default_rng(seed) if self._tie_break == "random" else None
        self._draining = False

    @classmethod
    def from_words(
        cls,
        words: Sequence[Word],
        *,
        tie_break: str = "first_seen",
        seed: Optional[int] = None,
    ) -> Optional["Alphabet"]:
        """
        Build an alphabet whose order follows the order of `words`.

        Args:
            words: Words sorted under the unknown order.
            tie_break: Policy for steps with several unconstrained symbols.
            seed: Seed for tie_break="random".

        Returns:
            None when the words contain no symbols at all (no words, or only
            empty words); otherwise the alphabet.
        """
        mode = _normalize_tie_break(tie_break)
        words = validate_words(words)
        symbols = collect_symbols(words)
        if not symbols:
            logger.debug("no symbols in %d words", len(words))
            return None
        index = ConstraintIndex.from_constraints(extract_constraints(words))
        logger.debug("alphabet of %d symbols with %d edges", len(symbols), len(index))
        return cls(symbols, index, tie_break=mode, seed=seed)

    @property
    def tie_break(self) -> str:
        return self._tie_break

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet(n_symbols={len(self._symbols)}, tie_break={self._tie_break!r})"

    def drain(self) -> "AlphabetDrain":
        """
        Return an iterator that pops the smallest symbol on every step.

        The alphabet can be drained once.

        Raises:
            RuntimeError: If drain() was already called.
        """
        if self._draining:
            raise RuntimeError("Alphabet has already been drained")
        self._draining = True
        return AlphabetDrain(self)

    def _candidates(self) -> List[Symbol]:
        return [s for s in self._symbols if s in self._ready]

    def _find_cycle(self) -> List[Symbol]:
        # Every remaining symbol has a predecessor, so walking predecessor
        # links must revisit a symbol.
        current = next(iter(self._symbols))
        path: List[Symbol] = [current]
        visited: Dict[Symbol, int] = {current: 0}
        while True:
            prior = self._index.precedes[current]
            current = min(prior, key=lambda s: self._symbols.get(s, len(self._symbols)))
            if current in visited:
                cycle = path[visited[current]:]
                cycle.reverse()
                return cycle
            visited[current] = len(path)
            path.append(current)

    def _choose(self, candidates: List[Symbol], emitted: Sequence[Symbol]) -> Symbol:
        if len(candidates) == 1:
            return candidates[0]
        if self._tie_break == "strict":
            raise AmbiguousOrderError(candidates, emitted)
        if self._tie_break == "random":
            assert self._rng is not None
            chosen = candidates[int(self._rng.integers(len(candidates)))]
        else:
            chosen = candidates[0]
        logger.debug("tie between %r resolved to %r", candidates, chosen)
        return chosen

    def _pop_next(self, emitted: Sequence[Symbol]) -> Symbol:
        if len(self._symbols) == 1:
            # Only one symbol left, it must be the smallest.
            symbol = next(iter(self._symbols))
        else:
            candidates = self._candidates()
            if not candidates:
                raise CyclicConstraintError(list(self._symbols), self._find_cycle())
            symbol = self._choose(candidates, emitted)
            self._ready.discard(symbol)
            self._ready.update(self._index.release(symbol))

        del self._symbols[symbol]
        return symbol


class AlphabetDrain:
    """
    Iterator over the symbols of an Alphabet, smallest first.

    Each step removes the returned symbol from the alphabet. The iterator is
    single pass; once exhausted (or after raising) it cannot be restarted.
    """

    def __init__(self, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._emitted: List[Symbol] = []
        self._failed = False

    def __iter__(self) -> "AlphabetDrain":
        return self

    def __next__(self) -> Symbol:
        if self._failed or len(self._alphabet) == 0:
            raise StopIteration
        try:
            symbol = self._alphabet._pop_next(self._emitted)
        except AlphabetOrderError:
            self._failed = True
            raise
        self._emitted.append(symbol)
        logger.debug("drained %r (%d left)", symbol, len(self._alphabet))
        return symbol

    def __length_hint__(self) -> int:
        return 0 if self._failed else len(self._alphabet)


def get_alphabet(
    words: Sequence[Word],
    *,
    tie_break: str = "first_seen",
    seed: Optional[int] = None,
) -> List[Symbol]:
    """
    Infer the symbol order under which `words` are sorted.

    Args:
        words: Words known to be sorted under the unknown order. A `str` word
            is read as a sequence of Unicode code points.
        tie_break: Policy when several symbols are unconstrained at the same
            step. "first_seen" (default) takes the one that appeared first in
            the input, "strict" raises AmbiguousOrderError, and "random" picks
            one using `seed`.
        seed: Seed for tie_break="random".

    Returns:
        Every distinct symbol of `words` exactly once, ordered consistently
        with each adjacent pair of words. Empty input (or only empty words)
        yields an empty list.

    Raises:
        CyclicConstraintError: If the adjacent pairs contradict each other,
            e.g. ["a", "b", "a"].
        AmbiguousOrderError: If tie_break="strict" and the words do not fix a
            single order.
        ValueError: If tie_break is unknown or a word is malformed.

    Example:
        >>> get_alphabet(["bac", "aaa", "acb"])
        ['b', 'a', 'c']
    """
    alphabet = Alphabet.from_words(words, tie_break=tie_break, seed=seed)
    if alphabet is None:
        return []
    return list(alphabet.drain())
