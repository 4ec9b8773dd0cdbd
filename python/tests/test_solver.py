"""Solver test suite — next-step map, path reconstruction, replay.

Distances are checked against an independent breadth-first search run
from every vertex, on hand-built graphs and on the small bundled levels.
"""

from __future__ import annotations

from collections import deque

import pytest

from klotski.engine.gameplay.game import GamePlay
from klotski.engine.gameplay.moves import slide
from klotski.engine.gamesolver import Solution, Solver
from klotski.engine.graphbuilder import Graph, GraphBuilder
from klotski.errors import IncompleteSolutionError, UnknownStateError
from klotski.models.board import Board, State
from klotski.models.level import LevelLoader

_LOADER = LevelLoader()

_SMALL_LEVELS = ["practice-2x2", "practice-3x3", "practice-3x4"]

# Two-cell board whose second cell is the target: any state with a label
# in cell 1 counts as solved.  The edges below are made up; the solver
# only needs the graph and the goal predicate.
_TOY_BOARD = Board(width=2, height=1, target=(1,))


def _undirected(*edges: tuple[State, State]) -> Graph:
    adj: dict[State, set[State]] = {}
    for a, b in edges:
        adj.setdefault(a, set()).add(b)
        adj.setdefault(b, set()).add(a)
    return {state: frozenset(nbrs) for state, nbrs in adj.items()}


_TOY_GRAPH = _undirected(
    ("a ", "b "),
    ("b ", "c "),
    ("a ", " g"),
    ("c ", " h"),
    ("d ", "c "),
    ("e ", "d "),
    ("e ", "b "),
    ("f ", "e "),
)


# -- helpers ------------------------------------------------------------------


def _goal_distances(board: Board, graph: Graph) -> dict[State, int]:
    """Distance to the nearest goal, by a plain BFS from each vertex."""
    out: dict[State, int] = {}
    for start in graph:
        seen = {start: 0}
        queue = deque([start])
        while queue:
            state = queue.popleft()
            if board.is_solved(state):
                out[start] = seen[state]
                break
            for nbr in graph[state]:
                if nbr not in seen:
                    seen[nbr] = seen[state] + 1
                    queue.append(nbr)
    return out


def _assert_optimal(board: Board, graph: Graph, solution: Solution) -> None:
    assert len(solution) == len(graph)
    expected = _goal_distances(board, graph)
    for state, nxt in solution.items():
        if board.is_solved(state):
            assert nxt == state
        else:
            assert nxt in graph[state]
            assert expected[nxt] == expected[state] - 1
        assert Solver.distance(solution, state) == expected[state]


def _level_graph(level_id: str) -> tuple[Board, Graph, State]:
    level = _LOADER.get(level_id)
    builder = GraphBuilder(level.board, level.initial)
    return level.board, builder.build(), builder.initial


# -- hand-built graph ---------------------------------------------------------


def test_toy_graph_next_steps_are_optimal() -> None:
    solution = Solver.solve(_TOY_BOARD, _TOY_GRAPH)
    _assert_optimal(_TOY_BOARD, _TOY_GRAPH, solution)
    assert solution["a "] == " g"
    assert solution["c "] == " h"
    assert solution["f "] == "e "
    assert Solver.distance(solution, "f ") == 4


def test_toy_graph_path() -> None:
    solution = Solver.solve(_TOY_BOARD, _TOY_GRAPH)
    assert Solver.path(solution, "d ") == ["d ", "c ", " h"]
    assert Solver.path(solution, " g") == [" g"]


def test_hint() -> None:
    solution = Solver.solve(_TOY_BOARD, _TOY_GRAPH)
    assert Solver.hint(solution, "b ") in {"a ", "c "}
    assert Solver.hint(solution, " h") is None


def test_unreachable_goal_is_fatal() -> None:
    graph = _undirected(("a ", "b "), ("b ", " g"), ("x ", "y "))
    with pytest.raises(IncompleteSolutionError):
        Solver.solve(_TOY_BOARD, graph)


def test_no_goal_at_all_is_fatal() -> None:
    # A 2-cell block can never cover a 3-cell target.
    board = Board(width=3, height=1, target=(0, 1, 2))
    graph = GraphBuilder(board, "AA ").build()
    assert len(graph) == 2
    with pytest.raises(IncompleteSolutionError):
        Solver.solve(board, graph)


def test_unknown_state_is_fatal() -> None:
    solution = Solver.solve(_TOY_BOARD, _TOY_GRAPH)
    with pytest.raises(UnknownStateError):
        Solver.path(solution, "z ")
    with pytest.raises(UnknownStateError):
        Solver.hint(solution, "z ")


# -- bundled levels -----------------------------------------------------------


@pytest.mark.parametrize("level_id", _SMALL_LEVELS)
def test_level_next_steps_are_optimal(level_id: str) -> None:
    board, graph, _ = _level_graph(level_id)
    _assert_optimal(board, graph, Solver.solve(board, graph))


def test_single_tile_2x2_takes_two_moves() -> None:
    board, graph, initial = _level_graph("practice-2x2")
    assert len(graph) == 4
    path = Solver.path(Solver.solve(board, graph), initial)
    assert len(path) == 3
    assert path[0] == "A   "
    assert path[-1] == "   A"
    assert path[1] in {" A  ", "  A "}


@pytest.mark.parametrize(
    ("level_id", "moves"),
    [("practice-2x2", 2), ("practice-3x3", 2), ("practice-3x4", 2)],
)
def test_level_min_moves(level_id: str, moves: int) -> None:
    game = GamePlay.from_level(_LOADER.get(level_id))
    assert game.min_moves == moves


# -- replay in the user's labels ----------------------------------------------


@pytest.mark.parametrize("level_id", _SMALL_LEVELS)
def test_steps_replay_with_original_labels(level_id: str) -> None:
    level = _LOADER.get(level_id)
    game = GamePlay.from_level(level)
    board = level.board

    current = level.initial
    steps = list(game.steps())
    assert len(steps) == game.min_moves
    for step in steps:
        assert slide(board, current, step.move.label, step.move.direction) == step.state
        assert set(step.state) == set(level.initial)
        current = step.state
    assert board.is_solved(current)


def test_steps_move_the_big_block_down() -> None:
    # The canonical form of this level swaps "a" and "A"; the replay must not.
    game = GamePlay.from_level(_LOADER.get("practice-3x4"))
    steps = list(game.steps())
    assert [str(step.move) for step in steps] == ["A down", "A down"]
    assert steps[-1].state == "a  " "b  " " AA" " AA"


def test_hint_on_solved_layout() -> None:
    board = Board(width=2, height=2, target=(3,))
    game = GamePlay(board, "   A")
    assert game.hint() is None
    assert game.min_moves == 0
    assert list(game.steps()) == []


def test_hint_is_first_step() -> None:
    game = GamePlay.from_level(_LOADER.get("practice-3x4"))
    assert game.hint() == next(game.steps()).move
    assert str(game.hint()) == "A down"


# -- classic levels -----------------------------------------------------------


@pytest.mark.parametrize(
    ("level_id", "moves"),
    [("set1-level15", 66), ("set1-level18", 81), ("set1-level19", 85)],
)
def test_classic_level_solution(level_id: str, moves: int) -> None:
    level = _LOADER.get(level_id)
    game = GamePlay.from_level(level)
    assert len(game.graph) == 25955
    assert game.min_moves == moves

    steps = list(game.steps())
    assert len(steps) == moves
    assert level.board.is_solved(steps[-1].state)
