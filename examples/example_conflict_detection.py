#!/usr/bin/env python3
"""
Example: Conflict and Ambiguity Detection

The following is demonstrated:
- How contradictory word lists are detected
- Strict tie-breaking for word lists that do not fix a single order
- Diagnosing tie groups and redundant evidence
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alphabet import (
    AmbiguousOrderError,
    CyclicConstraintError,
    get_alphabet,
    order_diagnostics,
)
from alphabet.network_analysis import ConstraintAnalyzer


def example_conflict():
    """
    Demonstrate failure on a contradictory word list.

    "a" before "b" before "a" cannot be sorted under any alphabet.
    """
    print("=" * 60)
    print("Example 1: Contradictory Words")
    print("=" * 60)

    words = ["x", "a", "b", "a"]
    print(f"\nWords: {words}")
    try:
        get_alphabet(words)
    except CyclicConstraintError as exc:
        print(f"\nRejected: {exc}")
        print(f"  Remaining symbols: {exc.remaining}")
        print(f"  Cycle: {exc.cycle}")

    analyzer = ConstraintAnalyzer(words)
    print(f"\nAll cycles: {analyzer.find_cycles()}")
    print(f"Blocked symbols: {analyzer.blocked_symbols()}")


def example_ambiguity():
    """
    Demonstrate tie-break policies on an under-constrained word list.
    """
    print("\n" + "=" * 60)
    print("Example 2: Ambiguous Words")
    print("=" * 60)

    words = ["ab", "ac", "db"]
    print(f"\nWords: {words}")
    print(f"first_seen: {get_alphabet(words)}")
    for seed in (1, 2, 3):
        order = get_alphabet(words, tie_break="random", seed=seed)
        print(f"random (seed={seed}): {order}")
    try:
        get_alphabet(words, tie_break="strict")
    except AmbiguousOrderError as exc:
        print(f"strict: {exc}")


def example_diagnostics():
    """
    Demonstrate the diagnostics summary for several word lists.
    """
    print("\n" + "=" * 60)
    print("Example 3: Diagnostics")
    print("=" * 60)

    cases = {
        "unique": ["bac", "aaa", "acb"],
        "ambiguous": ["ab", "ac", "db"],
        "redundant": ["a", "b", "c", "ca", "cc"],
        "conflicting": ["a", "b", "a"],
    }
    for name, words in cases.items():
        diag = order_diagnostics(words)
        print(f"\n  {name}: {words}")
        print(f"    consistent={diag.is_consistent} unique={diag.is_unique}")
        if diag.tie_groups:
            print(f"    tie groups: {[list(g) for g in diag.tie_groups]}")
        if diag.redundant_constraints:
            print(f"    redundant: {list(diag.redundant_constraints)}")
        if diag.cycles:
            print(f"    cycles: {[list(c) for c in diag.cycles]}")
        if diag.order is not None:
            print(f"    order: {list(diag.order)}")


def main():
    """Run all conflict detection examples."""
    example_conflict()
    example_ambiguity()
    example_diagnostics()

    print("\n" + "=" * 60)
    print("All conflict detection examples completed successfully.")
    print("=" * 60)


if __name__ == "__main__":
    main()
