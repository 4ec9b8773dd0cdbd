"""Shortest-path solver over the reachable state graph."""

from __future__ import annotations

import logging
from collections import deque

from klotski.engine.graphbuilder import Graph
from klotski.errors import IncompleteSolutionError, UnknownStateError
from klotski.models.board import Board, State

logger = logging.getLogger(__name__)

# Every non-solved state maps to a neighbour on one of its shortest paths
# to a solved state.  Solved states map to themselves.
Solution = dict[State, State]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, graph: Graph) -> Solution:
        """Return the next-step map for every vertex of ``graph``.

        Breadth-first search seeded with all solved vertices at once, so
        states leave the queue in non-decreasing distance from the nearest
        goal and the first step recorded for a state is an optimal one.
        """
        logger.info("Finding solutions...")
        solution: Solution = {}
        queue: deque[State] = deque()
        for state in graph:
            if board.is_solved(state):
                solution[state] = state
                queue.append(state)

        while queue:
            state = queue.popleft()
            for neighbor in graph[state]:
                if neighbor in solution:
                    continue
                solution[neighbor] = state
                queue.append(neighbor)

        if len(solution) != len(graph):
            raise IncompleteSolutionError(
                f"{len(graph) - len(solution)} of {len(graph)} states "
                f"cannot reach a solved state."
            )
        logger.info("Done.")
        return solution

    @staticmethod
    def path(solution: Solution, initial: State) -> list[State]:
        """Return the states from ``initial`` to a goal, both included.

        ``initial`` must be canonical.  ``len(result) - 1`` is the minimum
        number of moves.
        """
        state = Solver._lookup(solution, initial)
        states = [initial]
        while state != states[-1]:
            states.append(state)
            state = Solver._lookup(solution, state)
        return states

    @staticmethod
    def hint(solution: Solution, state: State) -> State | None:
        """Return the next state on a shortest path, or ``None`` if solved."""
        nxt = Solver._lookup(solution, state)
        return None if nxt == state else nxt

    @staticmethod
    def distance(solution: Solution, state: State) -> int:
        """Number of moves from ``state`` to the nearest solved state."""
        return len(Solver.path(solution, state)) - 1

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _lookup(solution: Solution, state: State) -> State:
        try:
            return solution[state]
        except KeyError:
            raise UnknownStateError(
                f"State is not part of the solved graph: {state!r}"
            ) from None
