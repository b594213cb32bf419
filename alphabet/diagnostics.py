"""
Word-list diagnostics for alphabet inference.

This module provides a small, explicit "input quality" surface:
  - consistency (no contradictory constraints)
  - uniqueness (the words fix exactly one order)
  - tie groups (symbols the words leave unordered relative to each other)
  - redundant evidence (constraints implied by others)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from alphabet.constraints import Symbol, Word, validate_words
from alphabet.core import get_alphabet
from alphabet.network_analysis import ConstraintAnalyzer


@dataclass(frozen=True)
class OrderDiagnostics:
    symbols: Tuple[Symbol, ...]
    n_constraints: int
    is_consistent: bool
    is_unique: bool
    # Precedence layers holding more than one symbol. Empty when inconsistent.
    tie_groups: Tuple[Tuple[Symbol, ...], ...]
    cycles: Tuple[Tuple[Symbol, ...], ...]
    redundant_constraints: Tuple[Tuple[Symbol, Symbol], ...]
    # First-seen tie-broken order, or None when the words are inconsistent.
    order: Optional[Tuple[Symbol, ...]]

    @property
    def n_symbols(self) -> int:
        return len(self.symbols)

    def unresolved_pairs(self) -> List[Tuple[Symbol, Symbol]]:
        """
        Return every symbol pair whose relative order the words leave open.

        Only pairs inside the same tie group are listed, so this is a lower
        bound on the open pairs.
        """
        pairs: List[Tuple[Symbol, Symbol]] = []
        for group in self.tie_groups:
            for i, a in enumerate(group):
                for b in group[i + 1:]:
                    pairs.append((a, b))
        return pairs


def order_diagnostics(
    words: Sequence[Word], max_cycles: Optional[int] = 10
) -> OrderDiagnostics:
    """
    Compute standard diagnostics for a sorted word list.

    Args:
        words: Words sorted under the unknown order.
        max_cycles: Maximum number of cycles to report (None for all).

    Returns:
        OrderDiagnostics describing whether and how the words determine an
        order.

    Raises:
        ValueError: If a word is malformed.
    """
    words = validate_words(words)
    analyzer = ConstraintAnalyzer(words)
    consistent = analyzer.is_acyclic()

    if consistent:
        tie_groups = tuple(tuple(g) for g in analyzer.tie_groups())
        cycles: Tuple[Tuple[Symbol, ...], ...] = ()
        redundant = tuple(analyzer.redundant_constraints())
        order: Optional[Tuple[Symbol, ...]] = tuple(get_alphabet(words))
    else:
        tie_groups = ()
        cycles = tuple(tuple(c) for c in analyzer.find_cycles(limit=max_cycles))
        redundant = ()
        order = None

    return OrderDiagnostics(
        symbols=tuple(analyzer.symbols),
        n_constraints=len(analyzer.constraints),
        is_consistent=bool(consistent),
        is_unique=bool(consistent and not tie_groups),
        tie_groups=tie_groups,
        cycles=cycles,
        redundant_constraints=redundant,
        order=order,
    )
