"""Core session logic — builds the graph, solves it, replays the answer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from klotski.engine.canonicalizer import Canonicalizer
from klotski.engine.gameplay.moves import Move, successors
from klotski.engine.gamesolver import Solution, Solver
from klotski.engine.graphbuilder import Graph, GraphBuilder
from klotski.errors import InvariantViolation
from klotski.models.board import Board, State
from klotski.models.level import Level


@dataclass(frozen=True)
class Step:
    """One move of a solution and the state it leads to."""

    move: Move
    state: State


class GamePlay:
    """Orchestrates a single solve run for one starting layout."""

    def __init__(self, board: Board, initial: State) -> None:
        self.board = board
        self.initial = initial
        self.labels = Canonicalizer.labels(initial)
        self._graph: Graph | None = None
        self._solution: Solution | None = None

    @classmethod
    def from_level(cls, level: Level) -> GamePlay:
        return cls(level.board, level.initial)

    # -- lazy computation -----------------------------------------------------

    @property
    def graph(self) -> Graph:
        if self._graph is None:
            self._graph = GraphBuilder(self.board, self.initial).build()
        return self._graph

    @property
    def solution(self) -> Solution:
        if self._solution is None:
            self._solution = Solver.solve(self.board, self.graph)
        return self._solution

    # -- queries --------------------------------------------------------------

    @property
    def canonical_initial(self) -> State:
        return Canonicalizer.normalize(self.initial, self.labels)

    def path(self) -> list[State]:
        """Canonical states from the start to a goal."""
        return Solver.path(self.solution, self.canonical_initial)

    @property
    def min_moves(self) -> int:
        return Solver.distance(self.solution, self.canonical_initial)

    def steps(self) -> Iterator[Step]:
        """Replay the shortest path on the layout as written by the user.

        The graph only knows canonical states, whose labels may differ from
        the ones in the level file.  Each canonical step is matched against
        the moves available in the user-labelled state so printed boards
        keep their original block letters.
        """
        current = self.initial
        for target in self.path()[1:]:
            step = self._match(current, target)
            yield step
            current = step.state

    def hint(self) -> Move | None:
        """First move of a shortest solution, or ``None`` if already solved."""
        nxt = Solver.hint(self.solution, self.canonical_initial)
        if nxt is None:
            return None
        return self._match(self.initial, nxt).move

    # -- helpers --------------------------------------------------------------

    def _match(self, current: State, target: State) -> Step:
        for move, raw in successors(self.board, current, self.labels):
            if Canonicalizer.normalize(raw, self.labels) == target:
                return Step(move, raw)
        raise InvariantViolation(
            f"No single move leads from {current!r} to {target!r}."
        )
