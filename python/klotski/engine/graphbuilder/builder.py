"""Exhaustive enumeration of the reachable state graph."""

from __future__ import annotations

import logging

from klotski.engine.canonicalizer import Canonicalizer
from klotski.engine.gameplay.moves import successors
from klotski.errors import DuplicateVertexError, InvalidLayoutError
from klotski.models.board import Board, State

logger = logging.getLogger(__name__)

# Undirected graph: every canonical state maps to its canonical neighbours.
Graph = dict[State, frozenset[State]]


class GraphBuilder:
    """Builds the graph of every state reachable from ``initial``.

    Vertices are canonical states and edges are single one-cell slides.
    The work-set and the partial graph belong to this instance, so two
    builders never share anything.
    """

    def __init__(self, board: Board, initial: State) -> None:
        if len(initial) != board.size:
            raise InvalidLayoutError(
                f"State has {len(initial)} cells, board has {board.size}."
            )
        self.board = board
        self.labels = Canonicalizer.labels(initial)
        self.initial = Canonicalizer.normalize(initial, self.labels)
        self._graph: dict[State, set[State]] = {}
        self._to_explore: set[State] = {self.initial}

    # -- public API -----------------------------------------------------------

    def build(self) -> Graph:
        """Expand states until the graph is closed under the move relation."""
        logger.info("Generating graph...")
        while self._to_explore:
            self._expand(self._to_explore.pop())
        logger.info("%d vertices found.", len(self._graph))
        return {state: frozenset(nbrs) for state, nbrs in self._graph.items()}

    # -- helpers --------------------------------------------------------------

    def _expand(self, state: State) -> None:
        """Add ``state`` with its edges and queue its unseen neighbours."""
        current = Canonicalizer.normalize(state, self.labels)
        if current in self._graph:
            raise DuplicateVertexError(f"State expanded twice:\n{current!r}")
        neighbors: set[State] = set()
        self._graph[current] = neighbors

        for _move, raw in successors(self.board, current, self.labels):
            nxt = Canonicalizer.normalize(raw, self.labels)
            neighbors.add(nxt)
            if nxt not in self._graph:
                self._to_explore.add(nxt)
