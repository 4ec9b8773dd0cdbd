"""The move relation — sliding one block by one cell."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from klotski.models.board import EMPTY, Board, Direction, State


@dataclass(frozen=True)
class Move:
    """Slide the block ``label`` one cell toward ``direction``."""

    label: str
    direction: Direction

    def __str__(self) -> str:
        return f"{self.label} {self.direction.value}"


def block_cells(state: State, label: str) -> list[int]:
    """Indices of every cell covered by block ``label``."""
    return [i for i, c in enumerate(state) if c == label]


def can_slide(
    board: Board, state: State, cells: list[int], direction: Direction
) -> bool:
    """Check whether the block made of ``cells`` may move in ``direction``.

    Every cell must be off the ``direction`` edge, and the cell it moves
    into must be empty or part of the same block.
    """
    label = state[cells[0]]
    for i in cells:
        if board.is_edge(direction, i):
            return False
        target = state[board.neighbor(direction, i)]
        if target != EMPTY and target != label:
            return False
    return True


def slide(
    board: Board, state: State, label: str, direction: Direction
) -> State | None:
    """Return ``state`` with block ``label`` moved, or ``None`` if blocked."""
    cells = block_cells(state, label)
    if not cells or not can_slide(board, state, cells, direction):
        return None
    return _shift(board, state, cells, direction)


def successors(
    board: Board, state: State, labels: tuple[str, ...]
) -> Iterator[tuple[Move, State]]:
    """Yield every feasible move from ``state`` with its (raw) result."""
    for label in labels:
        cells = block_cells(state, label)
        if not cells:
            continue
        for direction in Direction:
            if can_slide(board, state, cells, direction):
                yield Move(label, direction), _shift(board, state, cells, direction)


# -- helpers ------------------------------------------------------------------


def _shift(
    board: Board, state: State, cells: list[int], direction: Direction
) -> State:
    label = state[cells[0]]
    out = list(state)
    for i in cells:
        out[i] = EMPTY
    for i in cells:
        out[board.neighbor(direction, i)] = label
    return "".join(out)
