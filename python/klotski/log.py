"""Logging setup shared by the command line frontends."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO, console: Console | None = None) -> None:
    """Route the package's log records through a Rich handler on stderr."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        show_time=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("klotski")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
