#!/usr/bin/env python3
"""
Example 1: Basic Alphabet Inference

This example demonstrates the core functionality:
- Inferring a symbol order from a sorted word list
- Inspecting the constraints read from adjacent word pairs
- Draining an alphabet lazily, one symbol at a time
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alphabet import Alphabet, extract_constraints, get_alphabet

print("=" * 60)
print("Example 1: Basic Alphabet Inference")
print("=" * 60)

# A dictionary sorted under an unknown alphabet.
words = ["zzzzzz", "zzzzq", "t", "qqzq", "qqz5", "55", "5b", "rr", "rbb", "rbf"]

print("\nSorted words:")
for w in words:
    print(f"  {w}")

# Constraints come from the first differing position of each adjacent pair.
print("\nConstraints:")
for c in extract_constraints(words):
    left, right = words[c.pair_index], words[c.pair_index + 1]
    print(f"  {c.before!r} < {c.after!r}  ({left} / {right}, position {c.position})")

order = get_alphabet(words)
print(f"\nInferred alphabet: {' '.join(order)}")

# Unicode symbols are whole code points.
accented = ["źęń", "ęęę", "ęńź"]
print(f"\nUnicode words {accented}: {get_alphabet(accented)}")

# The drain is lazy and pops the smallest remaining symbol on every step.
alphabet = Alphabet.from_words(["d", "c", "b", "a"])
assert alphabet is not None
print("\nStep-by-step drain:")
for step, symbol in enumerate(alphabet.drain(), 1):
    print(f"  {step}. {symbol!r} ({len(alphabet)} left)")

# Degenerate input is not an error.
print(f"\nEmpty input: {get_alphabet([])}")
print(f"Only empty words: {get_alphabet(['', ''])}")
