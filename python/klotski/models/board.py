"""Board geometry for the sliding block puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from klotski.errors import InvalidLayoutError

# A state is one character per cell, row-major.  ' ' marks an empty cell,
# any other character is the label of the block covering that cell.
State = str

EMPTY = " "


class Direction(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass(frozen=True)
class Board:
    """A ``width`` × ``height`` grid with a target region.

    Cells are indexed ``0 .. width * height - 1`` in row-major order.  A
    state is solved when every ``target`` cell holds the same block.
    """

    width: int
    height: int
    target: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidLayoutError(
                f"Board must be at least 1×1, got {self.width}×{self.height}."
            )
        if not self.target:
            raise InvalidLayoutError("Board needs at least one target cell.")
        for i in self.target:
            if not 0 <= i < self.size:
                raise InvalidLayoutError(
                    f"Target cell {i} is outside the "
                    f"{self.width}×{self.height} board."
                )

    # -- construction helpers -------------------------------------------------

    def from_rows(self, rows: list[str]) -> State:
        """Join ``height`` rows of ``width`` characters into a state.

        Example::

            Board(4, 5, (13, 14, 17, 18)).from_rows(
                ["1223", "1223", "4567", "899a", "8  a"])
        """
        if len(rows) != self.height:
            raise InvalidLayoutError(
                f"Expected {self.height} rows, got {len(rows)}."
            )
        for r, row in enumerate(rows):
            if len(row) != self.width:
                raise InvalidLayoutError(
                    f"Row {r} has {len(row)} cells, expected {self.width}: "
                    f"{row!r}"
                )
        state = "".join(rows)
        if all(c == EMPTY for c in state):
            raise InvalidLayoutError("Layout has no blocks.")
        return state

    # -- geometry -------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    def is_edge(self, direction: Direction, index: int) -> bool:
        """Is ``index`` one of the ``direction``-most cells of the board."""
        if direction is Direction.LEFT:
            return index % self.width == 0
        if direction is Direction.RIGHT:
            return index % self.width == self.width - 1
        if direction is Direction.UP:
            return index < self.width
        return index >= self.size - self.width

    def neighbor(self, direction: Direction, index: int) -> int:
        """Index of the cell next to ``index`` in ``direction``.

        Callers check :meth:`is_edge` first; no wrapping is detected here.
        """
        offsets = {
            Direction.LEFT: -1,
            Direction.RIGHT: 1,
            Direction.UP: -self.width,
            Direction.DOWN: self.width,
        }
        return index + offsets[direction]

    # -- queries --------------------------------------------------------------

    def is_solved(self, state: State) -> bool:
        """True if every target cell is covered by one and the same block."""
        first = state[self.target[0]]
        if first == EMPTY:
            return False
        return all(state[i] == first for i in self.target)

    def rows(self, state: State) -> list[str]:
        """Split ``state`` into ``height`` rows of ``width`` characters."""
        w = self.width
        return [state[r * w : (r + 1) * w] for r in range(self.height)]

    def render(self, state: State) -> str:
        return "\n".join(self.rows(state))
