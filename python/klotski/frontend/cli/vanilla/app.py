"""Vanilla terminal frontend — plain text, no third-party rendering.

Prints the start position followed by one board per move, each board as
``height`` lines of ``width`` characters, separated by blank lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from klotski.engine.gameplay.game import GamePlay
from klotski.models.board import Board, State

logger = logging.getLogger(__name__)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, state: State) -> str:
    return board.render(state) + "\n"


# -- public entry points ------------------------------------------------------


def run(game: GamePlay, out: TextIO | None = None) -> int:
    """Print the full shortest solution.  Returns the number of moves."""
    out = out or sys.stdout
    board = game.board

    print(_render_board(board, game.initial), file=out)
    moves = 0
    for step in game.steps():
        moves += 1
        logger.debug("Move %d: %s", moves, step.move)
        print(_render_board(board, step.state), file=out)

    logger.info("Solved in %d moves.", moves)
    return moves


def run_hint(game: GamePlay, out: TextIO | None = None) -> None:
    """Print only the next move of a shortest solution."""
    out = out or sys.stdout
    move = game.hint()
    if move is None:
        print("Already solved.", file=out)
        return
    print(f"Next move: {move}  ({game.min_moves} moves left)", file=out)
