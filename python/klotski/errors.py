"""Exceptions raised by the solver.

``InvalidLayoutError`` and ``UnknownLevelError`` describe bad input.
``InvariantViolation`` and its subclasses mean the engine itself is wrong
(or was handed a state it never produced) and are never expected in a
correct run.
"""

from __future__ import annotations


class KlotskiError(Exception):
    """Base class for every error raised by this package."""


class InvalidLayoutError(KlotskiError, ValueError):
    """A level or board definition is malformed."""


class UnknownLevelError(KlotskiError, KeyError):
    """No level with the requested id exists."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class InvariantViolation(KlotskiError, RuntimeError):
    """An internal consistency check failed.  This is a bug, not bad data."""


class DuplicateVertexError(InvariantViolation):
    """A state was expanded twice while building the graph."""


class IncompleteSolutionError(InvariantViolation):
    """Some graph vertices received no next step toward a goal."""


class UnknownStateError(InvariantViolation):
    """A state was looked up that the graph builder never produced."""
