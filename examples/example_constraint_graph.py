#!/usr/bin/env python3
"""
Example: Constraint Graph Visualization

The following is demonstrated:
- Drawing the constraint graph of a word list
- Plotting the precedence matrix in inferred order
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from alphabet import get_alphabet
from alphabet.visualization import ConstraintVisualizer


def main():
    """Render the constraint graph and precedence matrix to a PNG file."""
    words = ["wrt", "wrf", "er", "ett", "rftt", "rfty"]
    order = get_alphabet(words)
    print(f"Words: {words}")
    print(f"Inferred alphabet: {order}")

    fig, (ax_graph, ax_matrix) = plt.subplots(1, 2, figsize=(14, 6))
    ConstraintVisualizer.constraint_graph(words, ax_graph)
    ConstraintVisualizer.precedence_heatmap(words, ax_matrix, order=order)
    fig.tight_layout()

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")
    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, "constraint_graph.png")
    fig.savefig(out_path, dpi=120)
    plt.close(fig)
    print(f"Saved: {out_path}")


if __name__ == "__main__":
    main()
