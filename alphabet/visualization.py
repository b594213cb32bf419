"""
Visualization tools for alphabet inference.

This module provides plotting capabilities for the precedence constraints read
from a sorted word list.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Set, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from alphabet.constraints import Symbol, Word
from alphabet.network_analysis import ConstraintAnalyzer


class ConstraintVisualizer:
    """
    Visualizes precedence constraints.

    Provides a graph drawing of the constraints and a heatmap of the direct
    precedence matrix.
    """

    @staticmethod
    def constraint_graph(
        words: Sequence[Word],
        ax: Optional[plt.Axes] = None,
        *,
        layout: str = "layered",
        show_redundant: bool = True,
    ) -> plt.Axes:
        """
        Draw the constraint graph of a word list.

        Nodes are symbols; edges point from the earlier symbol to the later
        one, with width scaled by the number of supporting word pairs. Edges
        on a cycle are drawn in red and redundant (transitively implied)
        edges are dashed.

        Args:
            words: Words sorted under the unknown order.
            ax: Matplotlib axes to plot on. If None, creates new figure.
            layout: "layered" (precedence layers left to right; falls back to
                "circular" when the constraints have a cycle), "circular" or
                "spring".
            show_redundant: Whether to draw transitively implied edges.

        Returns:
            Matplotlib axes object.

        Raises:
            ValueError: If layout is unknown.
        """
        layout_name = str(layout).strip().lower()
        if layout_name not in {"layered", "circular", "spring"}:
            raise ValueError(f"Invalid layout: {layout!r}")

        if ax is None:
            _, ax = plt.subplots(figsize=(10, 6))

        analyzer = ConstraintAnalyzer(words)
        graph = analyzer.graph.copy()
        if graph.number_of_nodes() == 0:
            ax.text(0.5, 0.5, "No symbols", ha="center", va="center", fontsize=12)
            ax.set_title("Constraint Graph")
            ax.axis("off")
            return ax

        acyclic = analyzer.is_acyclic()
        cycle_edges: Set[Tuple[Symbol, Symbol]] = set()
        redundant: Set[Tuple[Symbol, Symbol]] = set()
        if acyclic:
            redundant = set(analyzer.redundant_constraints())
            if not show_redundant:
                graph.remove_edges_from(redundant)
        else:
            for cycle in analyzer.find_cycles():
                cycle_edges.update(zip(cycle, cycle[1:] + cycle[:1]))

        if layout_name == "layered" and acyclic:
            for depth, layer in enumerate(analyzer.precedence_layers()):
                for sym in layer:
                    graph.nodes[sym]["layer"] = depth
            pos = nx.multipartite_layout(graph, subset_key="layer")
        elif layout_name == "spring":
            pos = nx.spring_layout(graph, seed=42)
        else:
            pos = nx.circular_layout(graph)

        edges = list(graph.edges(data=True))
        weights = [float(d.get("weight", 1.0)) for _u, _v, d in edges]
        max_w = max(weights) if weights else 1.0
        widths = [0.8 + 2.2 * (w / max_w) for w in weights]
        colors = [
            ("#c0392b" if (u, v) in cycle_edges else "#34495e") for u, v, _d in edges
        ]
        styles = [("dashed" if (u, v) in redundant else "solid") for u, v, _d in edges]

        nx.draw_networkx_nodes(graph, pos, node_size=500, node_color="#3498db", ax=ax)
        nx.draw_networkx_edges(
            graph,
            pos,
            edgelist=[(u, v) for u, v, _d in edges],
            width=widths,
            edge_color=colors,
            style=styles,
            arrows=True,
            arrowsize=12,
            ax=ax,
        )
        labels: Dict[Symbol, str] = {s: str(s) for s in graph.nodes()}
        nx.draw_networkx_labels(graph, pos, labels=labels, font_size=10, ax=ax)

        status = "acyclic" if acyclic else "cyclic"
        ax.set_title(f"Constraint Graph ({graph.number_of_nodes()} symbols, {status})")
        ax.axis("off")
        return ax

    @staticmethod
    def precedence_heatmap(
        words: Sequence[Word],
        ax: Optional[plt.Axes] = None,
        *,
        order: Optional[Sequence[Symbol]] = None,
    ) -> plt.Axes:
        """
        Plot the direct precedence matrix as a heatmap.

        Cell (i, j) counts the adjacent word pairs stating that symbol i comes
        before symbol j. When rows follow a consistent order, every non-zero
        cell lies above the diagonal.

        Args:
            words: Words sorted under the unknown order.
            ax: Matplotlib axes to plot on. If None, creates new figure.
            order: Row/column order. Defaults to first appearance.

        Returns:
            Matplotlib axes object.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 6))

        analyzer = ConstraintAnalyzer(words)
        if not analyzer.symbols:
            ax.text(0.5, 0.5, "No symbols", ha="center", va="center", fontsize=12)
            ax.set_title("Precedence Matrix")
            ax.axis("off")
            return ax

        matrix, labels = analyzer.precedence_matrix(order)
        tick_labels = [str(s) for s in labels]

        im = ax.imshow(matrix, cmap="Blues", aspect="auto")
        ax.set_xticks(np.arange(len(labels)))
        ax.set_yticks(np.arange(len(labels)))
        ax.set_xticklabels(tick_labels)
        ax.set_yticklabels(tick_labels)
        ax.set_xlabel("After")
        ax.set_ylabel("Before")
        ax.set_title("Precedence Matrix")

        plt.colorbar(im, ax=ax, label="Supporting pairs")

        return ax
