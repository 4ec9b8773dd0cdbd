"""Rich terminal frontend — coloured tables and panels.

Uses the ``rich`` library for styled output while sharing the same
session object as the vanilla CLI.  Every block gets its own colour so a
block can be followed from one board to the next.
"""

from __future__ import annotations

import logging

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from klotski.engine.gameplay.game import GamePlay
from klotski.engine.gameplay.moves import Move
from klotski.models.board import EMPTY, Board, State

logger = logging.getLogger(__name__)

_PALETTE = (
    "bold red",
    "bold green",
    "bold yellow",
    "bold blue",
    "bold magenta",
    "bold cyan",
    "bold white",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
)


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board, state: State, styles: dict[str, str], moved: str | None = None
) -> Table:
    """Return a Rich Table representing one arrangement."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.width):
        table.add_column(width=3, justify="center")

    target = set(board.target)
    for r, row in enumerate(board.rows(state)):
        cells: list[Text] = []
        for c, label in enumerate(row):
            index = r * board.width + c
            if label == EMPTY:
                style = "on grey23" if index in target else "dim"
                cells.append(Text("·", style=style))
            else:
                style = styles[label]
                if label == moved:
                    style += " reverse"
                cells.append(Text(f" {label} ", style=style))
        table.add_row(*cells)

    return table


def _styles(labels: tuple[str, ...]) -> dict[str, str]:
    return {label: _PALETTE[i % len(_PALETTE)] for i, label in enumerate(labels)}


def _caption(number: int, move: Move | None) -> Text:
    text = Text()
    if move is None:
        text.append("start", style="bold cyan")
        return text
    text.append(f"{number}. ", style="dim")
    text.append(move.label, style="bold yellow")
    text.append(f" {move.direction.value}", style="cyan")
    return text


# -- public entry points ------------------------------------------------------


def run(game: GamePlay, console: Console | None = None) -> int:
    """Render the full shortest solution.  Returns the number of moves."""
    console = console or Console()
    board = game.board
    styles = _styles(game.labels)

    frames = [
        Group(_caption(0, None), _render_board(board, game.initial, styles))
    ]
    for i, step in enumerate(game.steps(), 1):
        logger.debug("Move %d: %s", i, step.move)
        frames.append(
            Group(
                _caption(i, step.move),
                _render_board(board, step.state, styles, moved=step.move.label),
            )
        )

    moves = len(frames) - 1
    panel = Panel(
        Columns(frames, padding=(1, 2)),
        title=f"[bold cyan]Klotski  {board.width}×{board.height}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)
    console.print(
        Align.center(Text(f"Solved in {moves} moves!", style="bold green"))
    )
    return moves


def run_hint(game: GamePlay, console: Console | None = None) -> None:
    """Render the current board and the next move of a shortest solution."""
    console = console or Console()
    styles = _styles(game.labels)
    move = game.hint()

    status = Text()
    if move is None:
        status.append("Already solved!", style="bold green")
    else:
        status.append("Hint: ", style="cyan")
        status.append(str(move), style="bold")
        status.append(f"  ({game.min_moves} moves left)", style="dim")

    console.print(
        Panel(
            Group(
                Align.center(
                    _render_board(
                        game.board,
                        game.initial,
                        styles,
                        moved=move.label if move else None,
                    )
                ),
                Align.center(status),
            ),
            border_style="bright_blue",
            padding=(1, 2),
        )
    )
