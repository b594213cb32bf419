"""
Alphabet inference from sorted word lists.

Given words known to be sorted under an unknown symbol order, this package
recovers a symbol order consistent with every adjacent pair of words, or
reports that the words contradict each other.
"""

from alphabet.constraints import (
    Constraint,
    ConstraintIndex,
    extract_constraints,
    first_difference,
)
from alphabet.core import (
    TIE_BREAK_MODES,
    Alphabet,
    AlphabetDrain,
    AlphabetOrderError,
    AmbiguousOrderError,
    CyclicConstraintError,
    get_alphabet,
)
from alphabet.diagnostics import OrderDiagnostics, order_diagnostics

__version__ = "1.0.0"

__all__ = [
    "Alphabet",
    "AlphabetDrain",
    "AlphabetOrderError",
    "AmbiguousOrderError",
    "Constraint",
    "ConstraintIndex",
    "CyclicConstraintError",
    "OrderDiagnostics",
    "TIE_BREAK_MODES",
    "extract_constraints",
    "first_difference",
    "get_alphabet",
    "order_diagnostics",
]
