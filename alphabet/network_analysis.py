"""
Network analysis tools for alphabet constraints.

This module provides networkx views of the precedence constraints read from a
sorted word list, for inspecting why an order is (or is not) determined:
cycles, tie layers, redundant evidence and order verification.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from alphabet.constraints import (
    Constraint,
    Symbol,
    Word,
    collect_symbols,
    extract_constraints,
    validate_words,
)
from alphabet.core import CyclicConstraintError

try:
    import networkx as nx
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Constraint analysis requires networkx. Install with: pip install networkx"
    ) from exc


class ConstraintGraphBuilder:
    """
    Builds networkx graphs from sorted word lists.

    Nodes are symbols and edges are "comes-before" constraints.
    """

    def __init__(self, words: Sequence[Word]) -> None:
        """
        Initialize graph builder with a word list.

        Args:
            words: Words sorted under the unknown order.
        """
        self.words = validate_words(words)
        self.symbols: Dict[Symbol, int] = collect_symbols(self.words)
        self.constraints: List[Constraint] = extract_constraints(self.words)

    def build(self) -> nx.DiGraph:
        """
        Build a directed constraint graph.

        Every symbol is a node with a `first_seen` attribute. Edges store
        `pairs` (indices of the adjacent word pairs supporting the edge) and
        `weight` (number of supporting pairs).

        Returns:
            Directed graph of precedence constraints.
        """
        graph = nx.DiGraph()
        for sym, rank in self.symbols.items():
            graph.add_node(sym, first_seen=int(rank))

        for c in self.constraints:
            if graph.has_edge(c.before, c.after):
                graph.edges[c.before, c.after]["pairs"].append(c.pair_index)
            else:
                graph.add_edge(c.before, c.after, pairs=[c.pair_index])

        for _u, _v, data in graph.edges(data=True):
            data["weight"] = float(len(data["pairs"]))
        return graph


class ConstraintAnalyzer:
    """
    Performs structural analysis on the constraint graph of a word list.
    """

    def __init__(self, words: Sequence[Word]) -> None:
        """
        Initialize analyzer with a word list.

        Args:
            words: Words sorted under the unknown order.
        """
        self._builder = ConstraintGraphBuilder(words)
        self.graph = self._builder.build()

    @property
    def symbols(self) -> List[Symbol]:
        return list(self._builder.symbols)

    @property
    def constraints(self) -> List[Constraint]:
        return list(self._builder.constraints)

    def find_cycles(self, limit: Optional[int] = None) -> List[List[Symbol]]:
        """
        Enumerate simple cycles of contradictory constraints.

        Args:
            limit: Maximum number of cycles to return (default: all).

        Returns:
            Cycles as lists of symbols in precedence order, shortest first.
        """
        if limit is not None and int(limit) < 1:
            raise ValueError("limit must be at least 1")
        cycles = [list(cycle) for cycle in nx.simple_cycles(self.graph)]
        cycles.sort(key=len)
        if limit is not None:
            cycles = cycles[: int(limit)]
        return cycles

    def is_acyclic(self) -> bool:
        return bool(nx.is_directed_acyclic_graph(self.graph))

    def blocked_symbols(self) -> List[Symbol]:
        """
        Symbols that can never become unconstrained.

        These are the members of cycles and every symbol ordered after one.

        Returns:
            Blocked symbols in first-seen order (empty for acyclic graphs).
        """
        blocked = set()
        for component in nx.strongly_connected_components(self.graph):
            if len(component) < 2:
                continue
            for sym in component:
                blocked.add(sym)
                blocked.update(nx.descendants(self.graph, sym))
        return [s for s in self._builder.symbols if s in blocked]

    def _require_acyclic(self) -> None:
        if self.is_acyclic():
            return
        cycle = [u for u, _v in nx.find_cycle(self.graph)]
        raise CyclicConstraintError(self.blocked_symbols(), cycle)

    def precedence_layers(self) -> List[List[Symbol]]:
        """
        Group symbols into precedence layers.

        Layer k holds the symbols whose longest chain of predecessors has
        length k. A layer with more than one symbol is a tie the words do not
        resolve.

        Returns:
            Layers in order, each sorted by first appearance.

        Raises:
            CyclicConstraintError: If the constraints contain a cycle.
        """
        self._require_acyclic()
        rank = self._builder.symbols
        return [
            sorted(layer, key=lambda s: rank[s])
            for layer in nx.topological_generations(self.graph)
        ]

    def tie_groups(self) -> List[List[Symbol]]:
        """Return the precedence layers that hold more than one symbol."""
        return [layer for layer in self.precedence_layers() if len(layer) > 1]

    def is_unique(self) -> bool:
        """
        Check whether the words determine exactly one order.

        Returns:
            True if the graph is acyclic and every precedence layer holds a
            single symbol.
        """
        if not self.is_acyclic():
            return False
        return all(len(layer) == 1 for layer in self.precedence_layers())

    def redundant_constraints(self) -> List[Tuple[Symbol, Symbol]]:
        """
        List constraints already implied by other constraints.

        Uses nx.transitive_reduction(); an edge missing from the reduction is
        implied transitively.

        Raises:
            CyclicConstraintError: If the constraints contain a cycle.
        """
        self._require_acyclic()
        reduced = nx.transitive_reduction(self.graph)
        return [(u, v) for u, v in self.graph.edges() if not reduced.has_edge(u, v)]

    def precedence_matrix(
        self, order: Optional[Sequence[Symbol]] = None
    ) -> Tuple[np.ndarray, List[Symbol]]:
        """
        Dense adjacency matrix of direct constraints.

        Args:
            order: Row/column order of symbols. Defaults to first appearance.

        Returns:
            (matrix, labels) where matrix[i, j] is the number of adjacent
            word pairs stating labels[i] comes before labels[j].

        Raises:
            ValueError: If order does not list every symbol exactly once.
        """
        labels = list(order) if order is not None else self.symbols
        if len(set(labels)) != len(labels) or set(labels) != set(self.symbols):
            raise ValueError("order must list every symbol exactly once")
        matrix = nx.to_numpy_array(self.graph, nodelist=labels, weight="weight", dtype=float)
        return matrix, labels

    def violations(self, order: Sequence[Symbol]) -> List[Constraint]:
        """
        List the constraints a candidate order breaks.

        Args:
            order: Candidate symbol order.

        Returns:
            Constraints whose `before` symbol is not placed ahead of `after`.

        Raises:
            ValueError: If order does not list every symbol exactly once.
        """
        position = {s: i for i, s in enumerate(order)}
        if len(position) != len(order) or set(position) != set(self.symbols):
            raise ValueError("order must list every symbol exactly once")
        return [c for c in self.constraints if position[c.before] > position[c.after]]

    def is_consistent_order(self, order: Sequence[Symbol]) -> bool:
        return not self.violations(order)
