"""Klotski solver command line.

Usage::

    klotski                       # solve the default level
    klotski set1-level15 -f rich  # Rich terminal output
    klotski --list                # show the level catalogue
    klotski --levels my.json foo  # level "foo" from a custom file
    klotski set1-level18 --hint   # only the next move
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from klotski.engine.gameplay.game import GamePlay
from klotski.errors import KlotskiError
from klotski.log import setup_logging
from klotski.models.level import DEFAULT_LEVEL_ID, DEFAULT_LEVELS, LevelLoader

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "klotski.frontend.cli.vanilla.app",
    Frontend.rich: "klotski.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _print_levels(loader: LevelLoader) -> None:
    print("\n  === LEVELS ===\n")
    for level_id in loader.get_all_ids():
        level = loader.get(level_id)
        print(f"  {level.id:<16} {level.width}x{level.height}  {level.name}")
    print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    level: str = typer.Argument(
        DEFAULT_LEVEL_ID,
        help="Id of the level to solve.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    levels: Optional[Path] = typer.Option(
        None, "--levels",
        exists=True, dir_okay=False, readable=True,
        help="JSON file with level definitions (defaults to the bundled set).",
    ),
    list_levels: bool = typer.Option(
        False, "--list",
        help="List available levels and exit.",
    ),
    hint: bool = typer.Option(
        False, "--hint",
        help="Only print the next move of a shortest solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every move.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only log warnings and errors.",
    ),
) -> None:
    """Solve a Klotski level in the fewest possible moves."""
    if quiet:
        setup_logging(logging.WARNING)
    elif verbose:
        setup_logging(logging.DEBUG)
    else:
        setup_logging(logging.INFO)

    try:
        loader = LevelLoader(levels or DEFAULT_LEVELS)
        if list_levels:
            _print_levels(loader)
            return

        chosen = loader.get(level)
        logger.info("Solving %s (%s).", chosen.id, chosen.name)
        game = GamePlay.from_level(chosen)

        mod = importlib.import_module(_RUNNERS[frontend])
        if hint:
            mod.run_hint(game)
        else:
            mod.run(game)
    except KlotskiError as exc:
        err_console.print(Text.assemble(("Error: ", "bold red"), str(exc)))
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
